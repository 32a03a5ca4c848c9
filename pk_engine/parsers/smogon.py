"""Parser for trainer rosters written as Showdown-style team exports."""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, List, Optional

from ..models import Trainer, TrainerPokemon

logger = logging.getLogger(__name__)

_FIELD_PREFIXES = ("Ability:", "Level:", "EVs:", "IVs:", "Tera Type:", "Shiny:", "Happiness:")


def parse_trainers(raw_text: str) -> List[Trainer]:
    """Parse a roster file into trainers, keeping file order.

    A line ending in ``:`` (``Roxanne:``) opens a trainer section; the
    section body is a Showdown export, one set per blank-line separated
    chunk. Sets that appear before any trainer header, and trainers whose
    section holds no sets, are skipped with a warning.
    """

    trainers: List[Trainer] = []
    current: Optional[str] = None
    body: List[str] = []

    def _flush() -> None:
        if current is None:
            if any(line.strip() for line in body):
                logger.warning("Ignoring team text found before the first trainer header")
            return
        text = "\n".join(body).strip()
        if not text:
            logger.warning("Trainer %r has no team listed; skipping", current)
            return
        trainers.append(parse_team(text, name=current))

    for line in raw_text.splitlines():
        stripped = line.strip()
        if stripped.startswith("#"):
            continue
        if _is_trainer_header(stripped):
            _flush()
            current = stripped[:-1].strip()
            body = []
        else:
            body.append(line)
    _flush()
    return trainers


def parse_team(raw_text: str, *, name: str) -> Trainer:
    """Parse a Showdown-format team export into a Trainer object."""

    cleaned = raw_text.strip()
    if not cleaned:
        raise ValueError("Team text is empty")

    trainer = Trainer(name=name)
    for entry in _split_entries(cleaned):
        trainer.add_pokemon(_parse_entry(entry))
    return trainer


def _is_trainer_header(line: str) -> bool:
    if not line.endswith(":") or line.startswith("-"):
        return False
    if line.startswith(_FIELD_PREFIXES):
        return False
    return line.count(":") == 1


def _split_entries(text: str) -> List[str]:
    return [chunk.strip() for chunk in re.split(r"\n\s*\n", text) if chunk.strip()]


def _parse_entry(chunk: str) -> TrainerPokemon:
    lines = [line.strip() for line in chunk.splitlines() if line.strip()]
    if not lines:
        raise ValueError("Pokemon entry is empty")

    name, item = _parse_header(lines[0])
    pokemon = TrainerPokemon(
        name=name,
        species=_infer_species(name),
        item=item,
    )

    for line in lines[1:]:
        if line.startswith("Ability:"):
            pokemon.ability = _value_after_colon(line)
        elif line.startswith("Level:"):
            pokemon.level = _parse_level(line)
        elif line.startswith("EVs:"):
            pokemon.evs = _parse_stat_spread(_value_after_colon(line))
        elif line.startswith("IVs:"):
            pokemon.ivs = _parse_stat_spread(_value_after_colon(line))
        elif line.endswith("Nature"):
            pokemon.nature = line.replace("Nature", "").strip()
        elif line.startswith("-"):
            pokemon.moves.append(line.lstrip("- ").strip())
        else:
            pokemon.notes.append(line)

    return pokemon


def _parse_header(line: str) -> tuple[str, str | None]:
    if "@" not in line:
        return line.strip(), None
    name_part, item_part = line.split("@", 1)
    return name_part.strip(), item_part.strip()


def _parse_level(line: str) -> int | None:
    value = _value_after_colon(line)
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring unreadable level %r", value)
        return None


def _parse_stat_spread(spread: str) -> Dict[str, int]:
    stats: Dict[str, int] = {}
    for value, stat in _split_stat_tokens(spread):
        stats[stat] = value
    return stats


def _split_stat_tokens(spread: str) -> Iterable[tuple[int, str]]:
    for raw in spread.split("/"):
        raw = raw.strip()
        if not raw:
            continue
        parts = raw.split()
        if len(parts) < 2:
            continue
        try:
            value = int(parts[0])
        except ValueError:
            continue
        normalized = _normalize_stat(parts[1])
        if normalized:
            yield value, normalized


def _normalize_stat(stat: str) -> str | None:
    mapping = {
        "HP": "HP",
        "ATK": "Atk",
        "DEF": "Def",
        "SPA": "SpA",
        "SPD": "SpD",
        "SPE": "Spe",
    }
    return mapping.get(stat.upper().replace(".", ""))


def _value_after_colon(line: str) -> str:
    return line.split(":", 1)[1].strip()


def _infer_species(name: str) -> str:
    match = re.search(r"\(([^)]*)\)", name)
    if match:
        candidate = match.group(1).strip()
        if candidate and candidate.upper() not in {"M", "F"}:
            return candidate
    cleaned = re.sub(r"\([^)]*\)", "", name).strip()
    return cleaned or name.strip()
