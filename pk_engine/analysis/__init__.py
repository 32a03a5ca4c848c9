"""Moveset legality and counter-team heuristics."""

from .counter_team import CounterTeamBuilder
from .moveset import MOVE_CATEGORIES, MovesetResolver

__all__ = ["CounterTeamBuilder", "MOVE_CATEGORIES", "MovesetResolver"]
