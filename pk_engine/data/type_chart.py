"""Static type chart and defensive lookups for the counter heuristics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable

# Attacking type -> defending types hit for 2x, 0.5x and 0x.
TYPE_CHART: dict[str, dict[str, tuple[str, ...]]] = {
    "Normal": {"double": (), "half": ("Rock", "Steel"), "zero": ("Ghost",)},
    "Fire": {
        "double": ("Grass", "Ice", "Bug", "Steel"),
        "half": ("Fire", "Water", "Rock", "Dragon"),
        "zero": (),
    },
    "Water": {
        "double": ("Fire", "Ground", "Rock"),
        "half": ("Water", "Grass", "Dragon"),
        "zero": (),
    },
    "Electric": {
        "double": ("Water", "Flying"),
        "half": ("Electric", "Grass", "Dragon"),
        "zero": ("Ground",),
    },
    "Grass": {
        "double": ("Water", "Ground", "Rock"),
        "half": ("Fire", "Grass", "Poison", "Flying", "Bug", "Dragon", "Steel"),
        "zero": (),
    },
    "Ice": {
        "double": ("Grass", "Ground", "Flying", "Dragon"),
        "half": ("Fire", "Water", "Ice", "Steel"),
        "zero": (),
    },
    "Fighting": {
        "double": ("Normal", "Ice", "Rock", "Dark", "Steel"),
        "half": ("Poison", "Flying", "Psychic", "Bug", "Fairy"),
        "zero": ("Ghost",),
    },
    "Poison": {
        "double": ("Grass", "Fairy"),
        "half": ("Poison", "Ground", "Rock", "Ghost"),
        "zero": ("Steel",),
    },
    "Ground": {
        "double": ("Fire", "Electric", "Poison", "Rock", "Steel"),
        "half": ("Grass", "Bug"),
        "zero": ("Flying",),
    },
    "Flying": {
        "double": ("Grass", "Fighting", "Bug"),
        "half": ("Electric", "Rock", "Steel"),
        "zero": (),
    },
    "Psychic": {
        "double": ("Fighting", "Poison"),
        "half": ("Psychic", "Steel"),
        "zero": ("Dark",),
    },
    "Bug": {
        "double": ("Grass", "Psychic", "Dark"),
        "half": ("Fire", "Fighting", "Poison", "Flying", "Ghost", "Steel", "Fairy"),
        "zero": (),
    },
    "Rock": {
        "double": ("Fire", "Ice", "Flying", "Bug"),
        "half": ("Fighting", "Ground", "Steel"),
        "zero": (),
    },
    "Ghost": {
        "double": ("Psychic", "Ghost"),
        "half": ("Dark",),
        "zero": ("Normal",),
    },
    "Dragon": {
        "double": ("Dragon",),
        "half": ("Steel",),
        "zero": ("Fairy",),
    },
    "Dark": {
        "double": ("Psychic", "Ghost"),
        "half": ("Fighting", "Dark", "Fairy"),
        "zero": (),
    },
    "Steel": {
        "double": ("Ice", "Rock", "Fairy"),
        "half": ("Fire", "Water", "Electric", "Steel"),
        "zero": (),
    },
    "Fairy": {
        "double": ("Fighting", "Dragon", "Dark"),
        "half": ("Fire", "Poison", "Steel"),
        "zero": (),
    },
}


@dataclass(frozen=True, slots=True)
class TypeRelations:
    """How a single defending type fares against incoming attack types."""

    weaknesses: FrozenSet[str] = frozenset()
    resistances: FrozenSet[str] = frozenset()
    immunities: FrozenSet[str] = frozenset()


NO_RELATIONS = TypeRelations()


def _build_defensive_chart(chart: dict[str, dict[str, tuple[str, ...]]]) -> Dict[str, TypeRelations]:
    buckets: Dict[str, Dict[str, set[str]]] = {}
    for attack, hits in chart.items():
        for key, defenders in (("weaknesses", hits["double"]), ("resistances", hits["half"]), ("immunities", hits["zero"])):
            for defender in defenders:
                buckets.setdefault(defender, {"weaknesses": set(), "resistances": set(), "immunities": set()})
                buckets[defender][key].add(attack)
    return {
        defender: TypeRelations(
            weaknesses=frozenset(sets["weaknesses"]),
            resistances=frozenset(sets["resistances"]),
            immunities=frozenset(sets["immunities"]),
        )
        for defender, sets in buckets.items()
    }


DEFENSIVE_CHART: Dict[str, TypeRelations] = _build_defensive_chart(TYPE_CHART)


def relations_for(type_name: str) -> TypeRelations:
    """Return the defensive relations of a type; unknown types have none."""

    return DEFENSIVE_CHART.get(type_name, NO_RELATIONS)


def combined_weaknesses(defender_types: Iterable[str]) -> FrozenSet[str]:
    """Union of the weakness sets of every defending type.

    Immunities from a second type are not subtracted: a Water/Ground foe
    still lists Electric.
    """

    weak: set[str] = set()
    for defender in defender_types:
        weak.update(relations_for(defender).weaknesses)
    return frozenset(weak)


def damage_multiplier(attack_type: str, defender_types: Iterable[str]) -> float:
    """Compute damage multiplier for an attack hitting defender types."""

    chart = TYPE_CHART.get(attack_type)
    if chart is None:
        return 1.0

    multiplier = 1.0
    for defender in defender_types:
        if defender in chart["zero"]:
            multiplier *= 0.0
        elif defender in chart["double"]:
            multiplier *= 2.0
        elif defender in chart["half"]:
            multiplier *= 0.5
    return multiplier
