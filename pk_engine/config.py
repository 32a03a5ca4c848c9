"""Runtime settings for PK-Engine, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .models.progression import DEFAULT_BADGE_COUNT, DEFAULT_LEVEL_CAP

DEFAULT_DATA_DIR = Path(__file__).parent / "data" / "reference"


@dataclass(slots=True)
class EngineSettings:
    """Where reference data lives and the progression a session starts at."""

    data_dir: Path = DEFAULT_DATA_DIR
    badge_count: int = DEFAULT_BADGE_COUNT
    level_cap: int = DEFAULT_LEVEL_CAP


def load_settings(*, env_file: Optional[str] = None) -> EngineSettings:
    """Build settings from ``.env``/``.env.local`` and ``PK_ENGINE_*`` variables."""

    # Load default .env first, then overlay .env.local so user-specific values win.
    load_dotenv(env_file)
    load_dotenv(".env.local", override=True)

    data_dir = os.getenv("PK_ENGINE_DATA_DIR")
    return EngineSettings(
        data_dir=Path(data_dir) if data_dir else DEFAULT_DATA_DIR,
        badge_count=_int_from_env("PK_ENGINE_BADGE_COUNT", DEFAULT_BADGE_COUNT),
        level_cap=_int_from_env("PK_ENGINE_LEVEL_CAP", DEFAULT_LEVEL_CAP),
    )


def _int_from_env(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from exc
