"""PK-Engine: moveset legality and counter-team queries for gym runs."""

from .analysis import CounterTeamBuilder, MovesetResolver
from .data import ReferenceData
from .errors import DataLoadError, NotFoundError, PKEngineError
from .models import ProgressionState
from .services import QueryRouter

__all__ = [
    "CounterTeamBuilder",
    "DataLoadError",
    "MovesetResolver",
    "NotFoundError",
    "PKEngineError",
    "ProgressionState",
    "QueryRouter",
    "ReferenceData",
]
