"""Pydantic schemas for the JSON reference files."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import LevelUpMove, Move, Species


class LearnsetRecord(BaseModel):
    """Learnable moves of a species, grouped by how they are taught."""

    model_config = ConfigDict(populate_by_name=True)

    level_up: List[Tuple[int, str]] = Field(default_factory=list, alias="levelUp")
    tmhm: List[str] = Field(default_factory=list)
    egg: List[str] = Field(default_factory=list)
    tutor: List[str] = Field(default_factory=list)


class SpeciesRecord(BaseModel):
    """One entry of ``species.json``."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    types: List[str] = Field(min_length=1, max_length=2)
    base_stats: Dict[str, int] = Field(default_factory=dict, alias="baseStats")
    learnset: LearnsetRecord = Field(default_factory=LearnsetRecord)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("species name is empty")
        return value

    def to_species(self) -> Species:
        return Species(
            name=self.name,
            types=tuple(self.types),
            base_stats=dict(self.base_stats),
            level_up=tuple(LevelUpMove(move=move, level=level) for level, move in self.learnset.level_up),
            tmhm=tuple(self.learnset.tmhm),
            egg=tuple(self.learnset.egg),
            tutor=tuple(self.learnset.tutor),
        )


class MoveRecord(BaseModel):
    """One entry of ``moves.json``."""

    name: str
    type: str
    category: Optional[str] = None
    power: Optional[int] = None
    accuracy: Optional[int] = None
    pp: Optional[int] = None

    def to_move(self) -> Move:
        return Move(
            name=self.name,
            type=self.type,
            category=self.category,
            power=self.power,
            accuracy=self.accuracy,
            pp=self.pp,
        )
