"""Query handling services."""

from .query_router import UNRECOGNIZED, QueryRouter

__all__ = ["QueryRouter", "UNRECOGNIZED"]
