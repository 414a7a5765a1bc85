"""Settings loaded from environment variables.

Every variable uses the ``TODO_`` prefix. Missing or invalid values fall back
to the defaults on :class:`Settings`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    level = raw.strip().upper()
    if level not in logging.getLevelNamesMapping():
        return default
    return level


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    log_file: Path | None = None
    date_format: str = "%Y-%m-%d %H:%M"


def load_settings() -> Settings:
    """Read settings from the current environment."""
    defaults = Settings()
    return Settings(
        log_level=_env_log_level(_k("LOG_LEVEL"), defaults.log_level),
        log_file=_env_path(_k("LOG_FILE"), defaults.log_file),
        date_format=_env(_k("DATE_FORMAT"), defaults.date_format) or defaults.date_format,
    )
