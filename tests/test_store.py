"""Tests for loading the reference data files."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pk_engine.config import DEFAULT_DATA_DIR
from pk_engine.data import ReferenceData
from pk_engine.errors import DataLoadError, NotFoundError


def _write_reference(root: Path, species: list, moves: list) -> None:
    (root / "species.json").write_text(json.dumps(species), encoding="utf-8")
    (root / "moves.json").write_text(json.dumps(moves), encoding="utf-8")
    (root / "tm_locations.txt").write_text("TM26: Earthquake (Requires badge 6)\n", encoding="utf-8")
    (root / "trainer_battles.txt").write_text("Roxanne:\nGeodude\nLevel: 12\n- Tackle\n", encoding="utf-8")


def test_bundled_reference_data_loads(reference_data: ReferenceData) -> None:
    names = [species.name for species in reference_data.species]

    assert names[0] == "Treecko"
    assert "Garchomp" in names
    assert reference_data.get_move("Earthquake").type == "Ground"
    assert [gate.badges for gate in reference_data.gates_for_move("Earthquake")] == [6]
    assert reference_data.gates_for_move("Dragon Claw") == []
    assert {trainer.name for trainer in reference_data.trainers} >= {"Roxanne", "Brawly", "Wattson", "Erika"}


def test_every_learnset_move_has_a_move_record(reference_data: ReferenceData) -> None:
    for species in reference_data.species:
        moves = [entry.move for entry in species.level_up] + list(species.tmhm + species.egg + species.tutor)
        missing = [move for move in moves if reference_data.get_move(move) is None]
        assert not missing, f"{species.name} references unknown moves {missing}"


def test_from_directory_builds_species(tmp_path: Path) -> None:
    _write_reference(
        tmp_path,
        species=[
            {
                "name": " Geodude ",
                "types": ["Rock", "Ground"],
                "baseStats": {"speed": 20},
                "learnset": {"levelUp": [[1, "Tackle"], [31, "Earthquake"]], "tmhm": ["Earthquake"]},
            }
        ],
        moves=[{"name": "Tackle", "type": "Normal"}, {"name": "Earthquake", "type": "Ground"}],
    )

    data = ReferenceData.from_directory(tmp_path)
    geodude = data.get_species("geodude")

    assert geodude.name == "Geodude"
    assert geodude.types == ("Rock", "Ground")
    assert geodude.speed == 20
    assert [(entry.level, entry.move) for entry in geodude.level_up] == [(1, "Tackle"), (31, "Earthquake")]
    assert data.get_trainer("ROXANNE").pokemon[0].level == 12


def test_invalid_species_record_raises_data_load_error(tmp_path: Path) -> None:
    _write_reference(
        tmp_path,
        species=[{"name": "Triple", "types": ["Fire", "Water", "Grass"]}],
        moves=[],
    )

    with pytest.raises(DataLoadError, match="species.json record #0"):
        ReferenceData.from_directory(tmp_path)


def test_missing_file_raises_data_load_error(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError, match="species.json"):
        ReferenceData.from_directory(tmp_path)


def test_unknown_lookups_raise_not_found() -> None:
    data = ReferenceData.from_directory(DEFAULT_DATA_DIR)

    with pytest.raises(NotFoundError, match="Pokémon Missingno not found."):
        data.get_species("Missingno")
    with pytest.raises(NotFoundError, match="Trainer Giovanni not found."):
        data.get_trainer("Giovanni")
