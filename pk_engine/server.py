"""FastMCP server exposing PK-Engine queries as tools."""

from __future__ import annotations

import sys
from dataclasses import asdict
from typing import Annotated, Any, Dict, List, Optional

from fastmcp import FastMCP

from .config import load_settings
from .data import ReferenceData, damage_multiplier
from .errors import NotFoundError
from .models import ProgressionState
from .services import QueryRouter

app = FastMCP("pk-engine", version="0.1.0")

_settings = load_settings()
_progression = ProgressionState(
    badge_count=_settings.badge_count,
    level_cap=_settings.level_cap,
)
_router = QueryRouter(ReferenceData.from_directory(_settings.data_dir), _progression)


def _to_payload(result: Any) -> Any:
    if isinstance(result, list):
        return [_to_payload(item) for item in result]
    if hasattr(result, "__dataclass_fields__"):
        return asdict(result)
    return result


@app.tool()
def query(
    text: Annotated[str, "Free-text query, e.g. 'moveset for Garchomp' or 'badge 4'"],
) -> Any:
    """Answer a free-text PK-Engine query."""

    try:
        return _to_payload(_router.handle(text))
    except NotFoundError as exc:
        return f"Error: {exc}"


@app.tool()
def get_legal_moveset(
    species: Annotated[str, "Species name (e.g., 'Garchomp')"],
) -> Dict[str, Any] | str:
    """Return the moves a species can legally use at the current badge count and level cap."""

    try:
        return asdict(_router.resolver.resolve(species))
    except NotFoundError as exc:
        return f"Error: {exc}"


@app.tool()
def build_counter_team(
    trainer: Annotated[str, "Trainer name (e.g., 'Roxanne')"],
    monotype: Annotated[Optional[str], "Only consider Pokémon of this type"] = None,
) -> List[Dict[str, Any]] | str:
    """Suggest up to six Pokémon whose STAB moves hit the trainer's team super effectively."""

    try:
        return [asdict(candidate) for candidate in _router.builder.build(trainer, monotype=monotype)]
    except NotFoundError as exc:
        return f"Error: {exc}"


@app.tool()
def get_trainer_team(
    trainer: Annotated[str, "Trainer name (e.g., 'Roxanne')"],
) -> Dict[str, Any] | str:
    """Return the team a trainer fields, with each member's weaknesses."""

    try:
        payload = asdict(_router.data.get_trainer(trainer))
        payload["weaknesses"] = _router.builder.foe_weaknesses(trainer)
        return payload
    except NotFoundError as exc:
        return f"Error: {exc}"


@app.tool()
def set_badge_count(count: Annotated[int, "Number of badges earned"]) -> str:
    """Set the badge count used to gate TM/HM moves."""

    _progression.set_badge_count(count)
    return f"Badge count set to {count}"


@app.tool()
def set_level_cap(cap: Annotated[int, "Highest level reached"]) -> str:
    """Set the level cap used to filter level-up moves."""

    _progression.set_level_cap(cap)
    return f"Level cap set to {cap}"


@app.tool()
def get_progression() -> Dict[str, int]:
    """Return the current badge count and level cap."""

    return _progression.snapshot()._asdict()


@app.tool()
def calculate_type_matchup(
    attacker_type: Annotated[str, "Attacking type"],
    defender_type: Annotated[str, "Defending type"],
) -> str:
    """Return the effectiveness multiplier of an attacking type against a defender type."""

    atk = attacker_type.strip().title()
    defender = defender_type.strip().title()
    multiplier = damage_multiplier(atk, [defender])
    return f"{atk} vs {defender} -> {multiplier}x"


def run() -> None:
    """Entry point for `python -m pk_engine.server` or console script."""

    print("[pk-engine] Starting MCP server. Press Ctrl+C to stop.", file=sys.stderr)
    app.run()


if __name__ == "__main__":
    run()
