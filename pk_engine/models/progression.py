"""Mutable progression gates (badges earned, level cap)."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import NamedTuple

DEFAULT_BADGE_COUNT = 8
DEFAULT_LEVEL_CAP = 100


class ProgressionSnapshot(NamedTuple):
    badge_count: int
    level_cap: int


@dataclass(slots=True)
class ProgressionState:
    """Badge count and level cap shared by every query in a session.

    Values are not range checked: a negative level cap simply yields no
    level-up moves and a huge badge count unlocks every machine.
    """

    badge_count: int = DEFAULT_BADGE_COUNT
    level_cap: int = DEFAULT_LEVEL_CAP
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def set_badge_count(self, count: int) -> None:
        with self._lock:
            self.badge_count = int(count)

    def set_level_cap(self, cap: int) -> None:
        with self._lock:
            self.level_cap = int(cap)

    def snapshot(self) -> ProgressionSnapshot:
        with self._lock:
            return ProgressionSnapshot(self.badge_count, self.level_cap)
