"""
Runtime configuration read from the environment.

Values come from process environment variables, with a `.env` file at the
project root (or the path given to load_settings) loaded first through
python-dotenv. Variables already set in the environment win over the file.

Recognised variables:
    BATTLESHIP_BASE_URL            prefix of encoded game URLs
    BATTLESHIP_TOTAL_SHIPS         ships to place (default 2)
    BATTLESHIP_INCORRECT_ATTEMPTS  misses allowed before losing (default 3)
    BATTLESHIP_LOG_LEVEL           logging level name (default INFO)
    BATTLESHIP_LOG_JSON            "1"/"true" for JSON log lines
    BATTLESHIP_LOG_FILE            log file; relative paths land in storage/logs
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Mapping, Optional

from dotenv import load_dotenv

from .paths import ENV_FILE, LOG_DIR

if TYPE_CHECKING:
    from battleship.core.types import GameRules

_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """
    Loaded configuration.

    Rule fields left as None fall back to the engine defaults.
    """
    base_url: Optional[str] = None
    total_ship_count: Optional[int] = None
    incorrect_attempts_allowed: Optional[int] = None
    log_level: str = "INFO"
    log_json: bool = False
    log_file: Optional[Path] = None

    def rules(self) -> GameRules:
        """Build the GameRules these settings describe."""
        from battleship.core.types import DEFAULT_RULES, GameRules

        return GameRules(
            cell_count=DEFAULT_RULES.cell_count,
            total_ship_count=self.total_ship_count or DEFAULT_RULES.total_ship_count,
            incorrect_attempts_allowed=(
                self.incorrect_attempts_allowed or DEFAULT_RULES.incorrect_attempts_allowed
            ),
        )

    def codec(self):
        """Build the StateCodec these settings describe."""
        from battleship.codec import StateCodec

        if self.base_url:
            return StateCodec(base_url=self.base_url, rules=self.rules())
        return StateCodec(rules=self.rules())


def _int_or_none(env: Mapping[str, str], key: str) -> Optional[int]:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return None
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{key} must be positive, got {value}")
    return value


def load_settings(
    env: Optional[Mapping[str, str]] = None,
    env_file: Optional[Path] = ENV_FILE,
) -> Settings:
    """
    Read settings from the environment.

    Args:
        env: Mapping to read instead of os.environ (the .env file is not
             loaded when a mapping is given)
        env_file: .env file to load into os.environ first; None to skip

    Raises:
        ValueError: If a numeric variable is not a positive integer
    """
    if env is None:
        if env_file is not None and Path(env_file).exists():
            load_dotenv(env_file, override=False)
        env = os.environ

    log_file = env.get("BATTLESHIP_LOG_FILE") or None
    return Settings(
        base_url=env.get("BATTLESHIP_BASE_URL") or None,
        total_ship_count=_int_or_none(env, "BATTLESHIP_TOTAL_SHIPS"),
        incorrect_attempts_allowed=_int_or_none(env, "BATTLESHIP_INCORRECT_ATTEMPTS"),
        log_level=(env.get("BATTLESHIP_LOG_LEVEL") or "INFO").upper(),
        log_json=(env.get("BATTLESHIP_LOG_JSON") or "").strip().lower() in _TRUE,
        log_file=LOG_DIR / log_file if log_file else None,
    )
