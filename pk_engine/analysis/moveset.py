"""Resolve which moves a species may legally use at the current progression."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..data import ReferenceData
from ..models import LegalMoveset, ProgressionState, Species
from ..models.progression import ProgressionSnapshot

MOVE_CATEGORIES = ("level up", "tmhm", "egg", "tutor")


class MovesetResolver:
    """Filters a species' learnsets against the badge count and level cap."""

    def __init__(self, data: ReferenceData, progression: ProgressionState) -> None:
        self.data = data
        self.progression = progression

    def resolve(self, species_name: str) -> LegalMoveset:
        """Return the legal moveset for ``species_name``.

        Raises NotFoundError when the species is not in the catalog.
        """

        species = self.data.get_species(species_name)
        return self.resolve_species(species)

    def resolve_species(
        self,
        species: Species,
        snapshot: Optional[ProgressionSnapshot] = None,
    ) -> LegalMoveset:
        """Resolve against ``snapshot``, or the current progression when omitted."""

        if snapshot is None:
            snapshot = self.progression.snapshot()
        level_up = [entry for entry in species.level_up if entry.level <= snapshot.level_cap]
        tmhm = [move for move in species.tmhm if self._machine_unlocked(move, snapshot)]
        egg = list(species.egg)
        tutor = list(species.tutor)
        return LegalMoveset(
            species=species.name,
            level_up=level_up,
            tmhm=tmhm,
            egg=egg,
            tutor=tutor,
            all=_dedupe([entry.move for entry in level_up], tmhm, egg, tutor),
        )

    def _machine_unlocked(self, move: str, snapshot: ProgressionSnapshot) -> bool:
        gates = self.data.gates_for_move(move)
        if not gates:
            # No TM/HM entry teaches this move, so nothing gates it.
            return True
        return any(gate.badges <= snapshot.badge_count for gate in gates)


def _dedupe(*groups: Iterable[str]) -> List[str]:
    seen: set[str] = set()
    ordered: List[str] = []
    for group in groups:
        for move in group:
            if move not in seen:
                seen.add(move)
                ordered.append(move)
    return ordered
