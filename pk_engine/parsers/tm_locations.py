"""Parser for the TM/HM location listing with badge requirements."""

from __future__ import annotations

import logging
import re
from typing import List

from ..models import GateRequirement

logger = logging.getLogger(__name__)

_GATE_LINE = re.compile(r"^\s*((?:TM|HM)\d+)\s*:\s*(.+?)\s*\(Requires badge (-?\d+)\)", re.IGNORECASE)


def parse_gate_requirements(raw_text: str) -> List[GateRequirement]:
    """Parse ``TM26: Earthquake (Requires badge 6)`` lines into requirements.

    Blank lines and ``#`` comments are ignored. Any other line that does not
    match the expected shape is skipped with a warning.
    """

    requirements: List[GateRequirement] = []
    for lineno, line in enumerate(raw_text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        match = _GATE_LINE.match(stripped)
        if not match:
            logger.warning("Skipping malformed TM line %d: %r", lineno, stripped)
            continue
        machine, move, badges = match.groups()
        requirements.append(
            GateRequirement(machine=machine.upper(), move=move.strip(), badges=int(badges))
        )
    return requirements
