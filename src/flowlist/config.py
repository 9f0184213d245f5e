# src/flowlist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every field has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "FLOWLIST"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Surfaces ----
    show_welcome: bool

    # ---- Animation timing (seconds) ----
    welcome_cycle_seconds: float
    main_cycle_seconds: float
    celebration_dismiss_seconds: float

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "FlowList"),
            log_level=_env(_k("LOG_LEVEL"), "INFO"),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/flowlist")),
            show_welcome=_env_bool(_k("SHOW_WELCOME"), True),
            # The welcome surface cycles slower than the task list.
            welcome_cycle_seconds=_env_float(_k("WELCOME_CYCLE_SECONDS"), 4.0),
            main_cycle_seconds=_env_float(_k("MAIN_CYCLE_SECONDS"), 2.0),
            celebration_dismiss_seconds=_env_float(_k("CELEBRATION_DISMISS_SECONDS"), 2.5),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
