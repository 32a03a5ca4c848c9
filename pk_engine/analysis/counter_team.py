"""Heuristic counter-team builder based on same-type super-effective coverage."""

from __future__ import annotations

from typing import Callable, Dict, FrozenSet, List, Optional

from ..data import ReferenceData, combined_weaknesses
from ..models import CounterCandidate, LegalMoveset, Species, Trainer
from .moveset import MovesetResolver

MAX_TEAM_SIZE = 6
MAX_MOVES_SHOWN = 4


class CounterTeamBuilder:
    """Picks up to six species with a STAB move that hits a foe's weakness.

    Candidates are scanned in catalog order and the scan stops at the sixth
    hit, so this is a first-fit pick rather than a ranking. The accepted
    candidates are then ordered fastest first.
    """

    def __init__(
        self,
        data: ReferenceData,
        resolver: MovesetResolver,
        *,
        debug_logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.data = data
        self.resolver = resolver
        self._debug_logger = debug_logger

    def _debug(self, message: str) -> None:
        if self._debug_logger:
            self._debug_logger(message)

    def build(self, trainer_name: str, monotype: Optional[str] = None) -> List[CounterCandidate]:
        trainer = self.data.get_trainer(trainer_name)
        foe_weaknesses = list(self._foe_weakness_map(trainer).values())
        # One progression reading for the whole scan.
        snapshot = self.resolver.progression.snapshot()

        accepted: List[CounterCandidate] = []
        for species in self.data.species:
            if len(accepted) >= MAX_TEAM_SIZE:
                break
            if monotype and monotype not in species.types:
                continue

            moveset = self.resolver.resolve_species(species, snapshot)
            if not moveset.all:
                continue

            if self._hits_any_foe(species, moveset, foe_weaknesses):
                self._debug(f"{species.name} qualifies against {trainer.name}")
                accepted.append(
                    CounterCandidate(
                        name=species.name,
                        types=list(species.types),
                        speed=species.speed,
                        moves=moveset.all[:MAX_MOVES_SHOWN],
                    )
                )

        # sorted() is stable, so equal speeds keep catalog order.
        return sorted(accepted, key=lambda candidate: candidate.speed, reverse=True)

    def foe_weaknesses(self, trainer_name: str) -> Dict[str, List[str]]:
        """Weakness types of each fielded Pokémon whose species is known."""

        trainer = self.data.get_trainer(trainer_name)
        return {name: sorted(weak) for name, weak in self._foe_weakness_map(trainer).items()}

    def _foe_weakness_map(self, trainer: Trainer) -> Dict[str, FrozenSet[str]]:
        weaknesses: Dict[str, FrozenSet[str]] = {}
        for index, foe in enumerate(trainer.pokemon):
            foe_species = self.data.find_species(foe.species or foe.name)
            if foe_species is None:
                self._debug(f"Skipping unknown foe {foe.name} on {trainer.name}'s team")
                continue
            label = foe.name if foe.name not in weaknesses else f"{foe.name} #{index + 1}"
            weaknesses[label] = combined_weaknesses(foe_species.types)
        return weaknesses

    def _hits_any_foe(
        self,
        species: Species,
        moveset: LegalMoveset,
        foe_weaknesses: List[FrozenSet[str]],
    ) -> bool:
        stab_types = set(species.types)
        move_types = set()
        for move_name in moveset.all:
            move = self.data.get_move(move_name)
            if move is not None and move.type in stab_types:
                move_types.add(move.type)
        return any(move_types & weak for weak in foe_weaknesses)
