"""Tests for routing free-text queries."""

from __future__ import annotations

import pytest

from pk_engine.data import ReferenceData
from pk_engine.errors import NotFoundError
from pk_engine.models import CounterCandidate, LegalMoveset, LevelUpMove, ProgressionState, Trainer
from pk_engine.services import UNRECOGNIZED, QueryRouter


def test_badge_and_level_cap_update_progression(router: QueryRouter, progression: ProgressionState) -> None:
    assert router.handle("badge 4") == "Badge count set to 4"
    assert router.handle("  LEVEL   CAP 35 ") == "Level cap set to 35"

    assert progression.badge_count == 4
    assert progression.level_cap == 35


def test_setters_accept_out_of_range_values(router: QueryRouter, progression: ProgressionState) -> None:
    assert router.handle("badge -3") == "Badge count set to -3"
    assert router.handle("level cap 9000") == "Level cap set to 9000"
    assert progression.snapshot() == (-3, 9000)


def test_badge_gating_through_queries(small_data: ReferenceData) -> None:
    router = QueryRouter(small_data)

    router.handle("badge 4")
    assert "Earthquake" not in router.handle("moveset for Quaker").tmhm
    router.handle("badge 6")
    assert "Earthquake" in router.handle("moveset for Quaker").tmhm


def test_full_moveset_query(router: QueryRouter) -> None:
    result = router.handle("moveset for garchomp")

    assert isinstance(result, LegalMoveset)
    assert result.species == "Garchomp"


def test_category_moveset_queries(router: QueryRouter) -> None:
    assert router.handle("Level Up moveset for Mudkip")[:3] == [
        LevelUpMove(move="Tackle", level=1),
        LevelUpMove(move="Growl", level=1),
        LevelUpMove(move="Mud-Slap", level=6),
    ]
    assert "Surf" in router.handle("tmhm moveset for Mudkip")
    assert router.handle("egg moveset for Mudkip") == ["Refresh", "Curse", "Stomp"]
    assert router.handle("tutor moveset for Mudkip") == ["Mud-Slap", "Body Slam"]


def test_empty_category_returns_message(router: QueryRouter) -> None:
    assert router.handle("egg moveset for Swampert") == "No egg moves found for Swampert."


def test_counterteam_query_with_monotype(router: QueryRouter) -> None:
    result = router.handle("counterteam for Roxanne using only monotype Water")

    assert result
    assert all(isinstance(candidate, CounterCandidate) for candidate in result)
    assert all("Water" in candidate.types for candidate in result)


def test_counterteam_query_without_filter(router: QueryRouter) -> None:
    result = router.handle("counterteam for Roxanne")

    assert [candidate.name for candidate in result] == [
        "Wingull",
        "Treecko",
        "Mudkip",
        "Shroomish",
        "Lotad",
        "Makuhita",
    ]


def test_team_query_returns_trainer_record(router: QueryRouter) -> None:
    result = router.handle("team for roxanne")

    assert isinstance(result, Trainer)
    assert [member.name for member in result.pokemon] == ["Geodude", "Geodude", "Nosepass"]
    assert result.pokemon[2].item == "Sitrus Berry"
    assert result.pokemon[2].nature == "Bold"


@pytest.mark.parametrize("query", ["", "hello there", "badge four", "moveset Garchomp", "level cap"])
def test_unrecognized_queries_return_guidance(router: QueryRouter, progression: ProgressionState, query: str) -> None:
    assert router.handle(query) == UNRECOGNIZED
    assert progression.snapshot() == (8, 100)


def test_not_found_propagates(router: QueryRouter) -> None:
    with pytest.raises(NotFoundError, match="Missingno"):
        router.handle("moveset for Missingno")
    with pytest.raises(NotFoundError, match="Giovanni"):
        router.handle("counterteam for Giovanni")


def test_debug_logger_receives_messages(small_data: ReferenceData) -> None:
    messages: list[str] = []
    router = QueryRouter(small_data, debug_logger=messages.append)

    router.handle("counterteam for Rocky")

    assert any("Building counter team for Rocky" in message for message in messages)
    assert any("Skipping unknown foe Mystery" in message for message in messages)


def test_level_up_category_matches_full_moveset(router: QueryRouter) -> None:
    router.handle("level cap 20")

    assert router.handle("level up moveset for Mudkip") == router.handle("moveset for Mudkip").level_up
