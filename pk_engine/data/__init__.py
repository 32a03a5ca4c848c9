"""Static reference data and the type chart."""

from .store import ReferenceData
from .type_chart import TypeRelations, combined_weaknesses, damage_multiplier, relations_for

__all__ = [
    "ReferenceData",
    "TypeRelations",
    "combined_weaknesses",
    "damage_multiplier",
    "relations_for",
]
