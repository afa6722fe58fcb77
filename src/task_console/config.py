# src/task_console/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every field has a working default; nothing is required to start.
- Malformed values fall back to defaults instead of failing at startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "TASKS"

DEFAULT_PACING_DELAY = 0.5

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_optional_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Optional[Path]

    # ---- Console loop ----
    pacing_delay_seconds: float

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-console").strip() or "task-console"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_file = _env_optional_path(_k("LOG_FILE"))

        pacing_delay_seconds = max(0.0, _env_float(_k("PACING_DELAY"), DEFAULT_PACING_DELAY))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file=log_file,
            pacing_delay_seconds=pacing_delay_seconds,
        )


_SETTINGS: Optional[Settings] = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
