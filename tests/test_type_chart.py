"""Tests for the defensive type lookups."""

from pk_engine.data import combined_weaknesses, damage_multiplier, relations_for


def test_rock_relations() -> None:
    rock = relations_for("Rock")

    assert rock.weaknesses == {"Water", "Grass", "Fighting", "Ground", "Steel"}
    assert "Fire" in rock.resistances
    assert rock.immunities == frozenset()


def test_unknown_type_has_no_relations() -> None:
    assert relations_for("Shadow").weaknesses == frozenset()
    assert combined_weaknesses(["Shadow", "Ghost"]) == relations_for("Ghost").weaknesses


def test_combined_weaknesses_is_a_union() -> None:
    weak = combined_weaknesses(["Water", "Ground"])

    assert {"Electric", "Grass", "Ice", "Water"} <= weak
    assert relations_for("Ground").immunities == {"Electric"}


def test_damage_multiplier() -> None:
    assert damage_multiplier("Water", ["Rock", "Ground"]) == 4.0
    assert damage_multiplier("Electric", ["Ground"]) == 0.0
    assert damage_multiplier("Unknown", ["Rock"]) == 1.0
