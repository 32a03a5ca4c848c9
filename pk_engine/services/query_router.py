"""Route free-text queries to the progression setters and the resolvers."""

from __future__ import annotations

import re
from typing import Callable, List, Optional, Union

from ..analysis import CounterTeamBuilder, MovesetResolver
from ..data import ReferenceData
from ..models import CounterCandidate, LegalMoveset, LevelUpMove, ProgressionState, Trainer

UNRECOGNIZED = "Unrecognized query."

QueryResult = Union[str, List[str], List[LevelUpMove], LegalMoveset, List[CounterCandidate], Trainer]

# Checked in order; the first match wins.
_BADGE = re.compile(r"^badge\s+(-?\d+)\b", re.IGNORECASE)
_LEVEL_CAP = re.compile(r"^level\s+cap\s+(-?\d+)\b", re.IGNORECASE)
_CATEGORY_MOVESET = re.compile(r"^(level\s+up|tmhm|egg|tutor)\s+moveset\s+for\s+(.+)$", re.IGNORECASE)
_MOVESET = re.compile(r"^moveset\s+for\s+(.+)$", re.IGNORECASE)
_COUNTERTEAM = re.compile(
    r"^counterteam\s+for\s+(.+?)(?:\s+using\s+only\s+monotype\s+(\S+))?$",
    re.IGNORECASE,
)
_TEAM = re.compile(r"^team\s+for\s+(.+)$", re.IGNORECASE)


class QueryRouter:
    """Answers one text query at a time against shared progression state."""

    def __init__(
        self,
        data: ReferenceData,
        progression: Optional[ProgressionState] = None,
        *,
        debug_logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.data = data
        self.progression = progression or ProgressionState()
        self.resolver = MovesetResolver(data, self.progression)
        self.builder = CounterTeamBuilder(data, self.resolver, debug_logger=debug_logger)
        self._debug_logger = debug_logger

    def _debug(self, message: str) -> None:
        if self._debug_logger:
            self._debug_logger(message)

    def handle(self, query: str) -> QueryResult:
        """Answer ``query``; unknown species or trainers raise NotFoundError."""

        text = query.strip()

        match = _BADGE.match(text)
        if match:
            count = int(match.group(1))
            self.progression.set_badge_count(count)
            return f"Badge count set to {count}"

        match = _LEVEL_CAP.match(text)
        if match:
            cap = int(match.group(1))
            self.progression.set_level_cap(cap)
            return f"Level cap set to {cap}"

        match = _CATEGORY_MOVESET.match(text)
        if match:
            category = " ".join(match.group(1).lower().split())
            name = match.group(2).strip()
            self._debug(f"Resolving {category} moves for {name}")
            moves = self.resolver.resolve(name).category(category)
            if not moves:
                return f"No {category} moves found for {name}."
            return moves

        match = _MOVESET.match(text)
        if match:
            name = match.group(1).strip()
            self._debug(f"Resolving full moveset for {name}")
            return self.resolver.resolve(name)

        match = _COUNTERTEAM.match(text)
        if match:
            trainer = match.group(1).strip()
            monotype = match.group(2)
            self._debug(f"Building counter team for {trainer} (monotype={monotype})")
            return self.builder.build(trainer, monotype=monotype)

        match = _TEAM.match(text)
        if match:
            return self.data.get_trainer(match.group(1).strip())

        self._debug(f"No pattern matched {text!r}")
        return UNRECOGNIZED
