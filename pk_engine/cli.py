"""Interactive command-line interface for PK-Engine queries."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from typing import Any, Iterable, Optional, TextIO

from .config import load_settings
from .data import ReferenceData
from .errors import DataLoadError, NotFoundError
from .models import CounterCandidate, LegalMoveset, LevelUpMove, ProgressionState, Trainer
from .services import QueryRouter

PROMPT = "PK-Engine> "
EXIT_COMMANDS = {"exit", "quit"}

BANNER = """
Welcome to the PK-Engine CLI
Type queries like:
   badge 4
   level cap 50
   moveset for Garchomp
   tmhm moveset for Mudkip
   team for Roxanne
   counterteam for Roxanne using only monotype Water
"""


def _humanize_result(result: Any) -> str:
    if isinstance(result, str):
        return result
    if isinstance(result, LegalMoveset):
        return _humanize_moveset(result)
    if isinstance(result, Trainer):
        return _humanize_trainer(result)
    if isinstance(result, list):
        if not result:
            return "No matches."
        if all(isinstance(item, CounterCandidate) for item in result):
            return _humanize_counter_team(result)
        if all(isinstance(item, LevelUpMove) for item in result):
            return "\n".join(f"  - Lv {entry.level}: {entry.move}" for entry in result)
        return "\n".join(f"  - {item}" for item in result)
    return str(result)


def _humanize_moveset(moveset: LegalMoveset) -> str:
    lines: list[str] = [f"Legal moves for {moveset.species}:"]
    if moveset.level_up:
        lines.append("Level up:")
        lines.extend(f"  - Lv {entry.level}: {entry.move}" for entry in moveset.level_up)
    for label, moves in (("TM/HM", moveset.tmhm), ("Egg", moveset.egg), ("Tutor", moveset.tutor)):
        if moves:
            lines.append(f"{label}:")
            lines.extend(f"  - {move}" for move in moves)
    if not moveset.all:
        lines.append("  (none)")
    return "\n".join(lines)


def _humanize_counter_team(candidates: Iterable[CounterCandidate]) -> str:
    lines: list[str] = ["Counter team (fastest first):"]
    for candidate in candidates:
        lines.append(
            f"  - {candidate.name} [{'/'.join(candidate.types)}] Spe {candidate.speed}"
            f" :: {', '.join(candidate.moves) or 'no moves'}"
        )
    return "\n".join(lines)


def _humanize_trainer(trainer: Trainer) -> str:
    lines: list[str] = [f"{trainer.name}'s team:"]
    for member in trainer.pokemon:
        bits = [f"Lv {member.level}" if member.level is not None else "Lv ?"]
        if member.ability:
            bits.append(f"Ability: {member.ability}")
        if member.item:
            bits.append(f"Item: {member.item}")
        if member.nature:
            bits.append(f"{member.nature} Nature")
        lines.append(f"  - {member.name} ({', '.join(bits)})")
        if member.moves:
            lines.append(f"      moves: {', '.join(member.moves)}")
    return "\n".join(lines)


def _to_json(result: Any) -> str:
    if isinstance(result, list):
        payload: Any = [asdict(item) if is_dataclass(item) else item for item in result]
    elif is_dataclass(result):
        payload = asdict(result)
    else:
        payload = result
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _debug_print(enabled: bool, message: str) -> None:
    if enabled:
        sys.stderr.write(f"[debug] {message}\n")


def _answer(router: QueryRouter, line: str, *, as_json: bool, out: TextIO) -> None:
    try:
        result = router.handle(line)
    except NotFoundError as exc:
        out.write(f"Error: {exc}\n")
        return
    out.write((_to_json(result) if as_json else _humanize_result(result)) + "\n")


def run_repl(
    router: QueryRouter,
    *,
    as_json: bool = False,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> None:
    """Read queries line by line until ``exit``, ``quit`` or end of input."""

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stdout.write(BANNER + "\n")
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break
        text = line.strip()
        if not text:
            continue
        if text.lower() in EXIT_COMMANDS:
            break
        _answer(router, text, as_json=as_json, out=stdout)
    stdout.write("Goodbye!\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Query moveset legality and counter teams")
    parser.add_argument(
        "--data-dir",
        help="Directory holding species.json, moves.json, tm_locations.txt and trainer_battles.txt",
    )
    parser.add_argument(
        "--badges",
        type=int,
        help="Starting badge count (default: PK_ENGINE_BADGE_COUNT or 8)",
    )
    parser.add_argument(
        "--level-cap",
        type=int,
        help="Starting level cap (default: PK_ENGINE_LEVEL_CAP or 100)",
    )
    parser.add_argument(
        "--query",
        action="append",
        default=[],
        help="Run a query and exit instead of starting the prompt (repeatable)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit structured results as JSON",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print debug progress information to stderr",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    _debug_print(args.debug, f"Arguments parsed: {args}")

    settings = load_settings()
    data_dir = args.data_dir or settings.data_dir
    try:
        data = ReferenceData.from_directory(data_dir)
    except DataLoadError as exc:
        raise SystemExit(f"Failed to load reference data: {exc}")
    _debug_print(args.debug, f"Loaded {len(data.species)} species from {data_dir}")

    progression = ProgressionState(
        badge_count=args.badges if args.badges is not None else settings.badge_count,
        level_cap=args.level_cap if args.level_cap is not None else settings.level_cap,
    )
    router = QueryRouter(
        data,
        progression,
        debug_logger=(lambda msg: _debug_print(args.debug, msg)),
    )

    if args.query:
        for text in args.query:
            _answer(router, text, as_json=args.json, out=sys.stdout)
        return 0

    run_repl(router, as_json=args.json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
