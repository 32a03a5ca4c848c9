"""Shared fixtures for the PK-Engine tests."""

from __future__ import annotations

import pytest

from pk_engine.config import DEFAULT_DATA_DIR
from pk_engine.data import ReferenceData
from pk_engine.models import GateRequirement, LevelUpMove, Move, ProgressionState, Species, Trainer, TrainerPokemon
from pk_engine.services import QueryRouter


@pytest.fixture(scope="session")
def reference_data() -> ReferenceData:
    return ReferenceData.from_directory(DEFAULT_DATA_DIR)


@pytest.fixture()
def progression() -> ProgressionState:
    return ProgressionState()


@pytest.fixture()
def router(reference_data: ReferenceData, progression: ProgressionState) -> QueryRouter:
    return QueryRouter(reference_data, progression)


def make_species(name, types, speed=50, level_up=(), tmhm=(), egg=(), tutor=()) -> Species:
    return Species(
        name=name,
        types=tuple(types),
        base_stats={"speed": speed} if speed is not None else {},
        level_up=tuple(LevelUpMove(move=move, level=level) for level, move in level_up),
        tmhm=tuple(tmhm),
        egg=tuple(egg),
        tutor=tuple(tutor),
    )


@pytest.fixture()
def small_data() -> ReferenceData:
    """A hand-built catalog where every gate and weakness is easy to reason about."""

    species = [
        make_species("Pebble", ["Rock"], speed=20, level_up=[(1, "Tackle")]),
        make_species(
            "Splashy",
            ["Water"],
            speed=40,
            level_up=[(1, "Tackle"), (10, "Water Gun")],
            tmhm=["Surf"],
        ),
        make_species(
            "Quaker",
            ["Ground"],
            speed=60,
            level_up=[(5, "Mud-Slap")],
            tmhm=["Earthquake", "Secret Dig"],
        ),
        make_species("Sprout", ["Grass"], speed=40, level_up=[(1, "Absorb")], egg=["Leech Seed"]),
        make_species("Idle", ["Normal"], speed=90, level_up=[(50, "Tackle")]),
    ]
    moves = [
        Move(name="Tackle", type="Normal"),
        Move(name="Water Gun", type="Water"),
        Move(name="Surf", type="Water"),
        Move(name="Mud-Slap", type="Ground"),
        Move(name="Earthquake", type="Ground"),
        Move(name="Secret Dig", type="Ground"),
        Move(name="Absorb", type="Grass"),
        Move(name="Leech Seed", type="Grass"),
    ]
    gates = [
        GateRequirement(machine="TM26", move="Earthquake", badges=6),
        GateRequirement(machine="HM03", move="Surf", badges=5),
    ]
    trainers = [
        Trainer(
            name="Rocky",
            pokemon=[
                TrainerPokemon(name="Pebble", species="Pebble", level=12, ability="Sturdy"),
                TrainerPokemon(name="Mystery", species="Mystery", level=14),
            ],
        )
    ]
    return ReferenceData(species=species, moves=moves, gates=gates, trainers=trainers)
