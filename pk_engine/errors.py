"""Exception types raised by the PK-Engine query tool."""

from __future__ import annotations


class PKEngineError(RuntimeError):
    """Base class for PK-Engine failures."""


class NotFoundError(PKEngineError, LookupError):
    """Raised when a species or trainer is missing from the reference data."""

    def __init__(self, kind: str, identifier: str) -> None:
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} {identifier} not found.")


class DataLoadError(PKEngineError):
    """Raised when a reference data file is missing or fails validation."""
