"""Read-only reference data: species, moves, TM gates and trainer rosters."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from pydantic import ValidationError

from ..errors import DataLoadError, NotFoundError
from ..models import GateRequirement, Move, Species, Trainer
from ..parsers import parse_gate_requirements, parse_trainers
from .schemas import MoveRecord, SpeciesRecord

logger = logging.getLogger(__name__)

SPECIES_FILE = "species.json"
MOVES_FILE = "moves.json"
TM_FILE = "tm_locations.txt"
TRAINERS_FILE = "trainer_battles.txt"


class ReferenceData:
    """Immutable lookup tables loaded once per session.

    Species keep their file order; the counter builder relies on it to
    break ties and to decide which candidates make the cut.
    """

    def __init__(
        self,
        *,
        species: Iterable[Species] = (),
        moves: Iterable[Move] = (),
        gates: Iterable[GateRequirement] = (),
        trainers: Iterable[Trainer] = (),
    ) -> None:
        self._species: List[Species] = []
        self._species_index: Dict[str, Species] = {}
        for entry in species:
            key = entry.name.upper()
            if key in self._species_index:
                logger.warning("Duplicate species %r; keeping the first entry", entry.name)
                continue
            self._species.append(entry)
            self._species_index[key] = entry

        self._moves: Dict[str, Move] = {move.name: move for move in moves}
        self._gates: List[GateRequirement] = list(gates)
        self._gates_by_move: Dict[str, List[GateRequirement]] = {}
        for gate in self._gates:
            self._gates_by_move.setdefault(gate.move, []).append(gate)

        self._trainers: Dict[str, Trainer] = {}
        for trainer in trainers:
            key = trainer.name.lower()
            if key in self._trainers:
                logger.warning("Duplicate trainer %r; keeping the first entry", trainer.name)
                continue
            self._trainers[key] = trainer

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    @classmethod
    def from_directory(cls, data_dir: str | Path) -> "ReferenceData":
        """Load every reference file from ``data_dir``."""

        root = Path(data_dir)
        species_rows = _read_json(root / SPECIES_FILE)
        move_rows = _read_json(root / MOVES_FILE)
        species = [
            _validate(SpeciesRecord, row, SPECIES_FILE, index).to_species()
            for index, row in enumerate(species_rows)
        ]
        moves = [
            _validate(MoveRecord, row, MOVES_FILE, index).to_move()
            for index, row in enumerate(move_rows)
        ]
        gates = parse_gate_requirements(_read_text(root / TM_FILE))
        trainers = parse_trainers(_read_text(root / TRAINERS_FILE))
        logger.debug(
            "Loaded %d species, %d moves, %d TM gates, %d trainers from %s",
            len(species),
            len(moves),
            len(gates),
            len(trainers),
            root,
        )
        return cls(species=species, moves=moves, gates=gates, trainers=trainers)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    @property
    def species(self) -> List[Species]:
        """All species in catalog order."""

        return list(self._species)

    @property
    def trainers(self) -> List[Trainer]:
        return list(self._trainers.values())

    @property
    def gates(self) -> List[GateRequirement]:
        return list(self._gates)

    def find_species(self, name: str) -> Optional[Species]:
        return self._species_index.get(name.strip().upper())

    def get_species(self, name: str) -> Species:
        species = self.find_species(name)
        if species is None:
            raise NotFoundError("Pokémon", name)
        return species

    def get_move(self, name: str) -> Optional[Move]:
        return self._moves.get(name)

    def gates_for_move(self, move: str) -> List[GateRequirement]:
        """Gate requirements naming ``move``; empty when the move is ungated."""

        return list(self._gates_by_move.get(move, ()))

    def get_trainer(self, name: str) -> Trainer:
        trainer = self._trainers.get(name.strip().lower())
        if trainer is None:
            raise NotFoundError("Trainer", name)
        return trainer


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DataLoadError(f"Cannot read reference file {path}: {exc}") from exc


def _read_json(path: Path) -> list:
    try:
        payload = json.loads(_read_text(path))
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise DataLoadError(f"{path} must contain a JSON list of records")
    return payload


def _validate(model, row, filename: str, index: int):
    try:
        return model.model_validate(row)
    except ValidationError as exc:
        raise DataLoadError(f"{filename} record #{index} is invalid: {exc}") from exc
