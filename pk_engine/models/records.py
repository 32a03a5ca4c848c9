"""Core dataclasses shared across the PK-Engine resolvers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union


@dataclass(frozen=True, slots=True)
class LevelUpMove:
    """A move learned by leveling up, paired with the level it unlocks at."""

    move: str
    level: int


@dataclass(frozen=True, slots=True)
class Species:
    """Static definition of a Pokémon species and its learnsets."""

    name: str
    types: Tuple[str, ...]
    # Excluded from the hash; the remaining fields are immutable.
    base_stats: Dict[str, int] = field(default_factory=dict, hash=False)
    level_up: Tuple[LevelUpMove, ...] = ()
    tmhm: Tuple[str, ...] = ()
    egg: Tuple[str, ...] = ()
    tutor: Tuple[str, ...] = ()

    @property
    def speed(self) -> int:
        return self.base_stats.get("speed", 0)


@dataclass(frozen=True, slots=True)
class Move:
    """Static move definition. Only ``type`` matters to the counter heuristics."""

    name: str
    type: str
    category: Optional[str] = None
    power: Optional[int] = None
    accuracy: Optional[int] = None
    pp: Optional[int] = None


@dataclass(frozen=True, slots=True)
class GateRequirement:
    """A TM/HM entry and the badge count needed before it can be used."""

    machine: str
    move: str
    badges: int


@dataclass(slots=True)
class TrainerPokemon:
    """A single member of a trainer's team, as listed in the roster file."""

    name: str
    species: Optional[str] = None
    level: Optional[int] = None
    item: Optional[str] = None
    ability: Optional[str] = None
    nature: Optional[str] = None
    evs: Dict[str, int] = field(default_factory=dict)
    ivs: Dict[str, int] = field(default_factory=dict)
    moves: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)


@dataclass(slots=True)
class Trainer:
    """A named opponent and the team they field, in battle order."""

    name: str
    pokemon: List[TrainerPokemon] = field(default_factory=list)

    def add_pokemon(self, pokemon: TrainerPokemon) -> None:
        self.pokemon.append(pokemon)

    def is_empty(self) -> bool:
        return not self.pokemon


@dataclass(slots=True)
class LegalMoveset:
    """Moves a species may use under the current progression, by category."""

    species: str
    level_up: List[LevelUpMove] = field(default_factory=list)
    tmhm: List[str] = field(default_factory=list)
    egg: List[str] = field(default_factory=list)
    tutor: List[str] = field(default_factory=list)
    all: List[str] = field(default_factory=list)

    def category(self, name: str) -> Union[List[LevelUpMove], List[str]]:
        """Return the entries for ``level up``, ``tmhm``, ``egg`` or ``tutor``.

        Level-up entries keep the level each move unlocks at.
        """

        key = name.strip().lower().replace(" ", "_")
        if key == "level_up":
            return list(self.level_up)
        if key in {"tmhm", "egg", "tutor"}:
            return list(getattr(self, key))
        raise KeyError(name)


@dataclass(slots=True)
class CounterCandidate:
    """A species picked to answer a trainer's team."""

    name: str
    types: List[str]
    speed: int
    moves: List[str] = field(default_factory=list)
