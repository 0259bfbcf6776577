"""Settings loaded from environment variables.

One frozen Settings object per process, built by `load_settings()`.
CLI options may override single fields with `dataclasses.replace`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TODOS"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


def _env_log_level(name: str, default: str) -> str:
    raw = (os.getenv(name) or "").strip().upper()
    return raw if raw in LOG_LEVELS else default


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    log_file: Path | None = None
    seed_welcome: bool = True


def load_settings() -> Settings:
    return Settings(
        log_level=_env_log_level(_k("LOG_LEVEL"), "WARNING"),
        log_file=_env_path(_k("LOG_FILE")),
        seed_welcome=_env_bool(_k("SEED_WELCOME"), True),
    )
