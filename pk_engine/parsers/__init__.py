"""Parsers for the plain-text reference files."""

from .smogon import parse_team, parse_trainers
from .tm_locations import parse_gate_requirements

__all__ = [
    "parse_gate_requirements",
    "parse_team",
    "parse_trainers",
]
