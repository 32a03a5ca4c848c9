"""Shared dataclasses for PK-Engine lookups."""

from .progression import ProgressionState
from .records import (
    CounterCandidate,
    GateRequirement,
    LegalMoveset,
    LevelUpMove,
    Move,
    Species,
    Trainer,
    TrainerPokemon,
)

__all__ = [
    "CounterCandidate",
    "GateRequirement",
    "LegalMoveset",
    "LevelUpMove",
    "Move",
    "ProgressionState",
    "Species",
    "Trainer",
    "TrainerPokemon",
]
