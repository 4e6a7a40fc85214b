# src/taskpad/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every value has a default.
- Malformed values fall back to defaults instead of failing startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKPAD"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


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

    # ---- Console ----
    console_enabled: bool
    dark_mode: bool

    # ---- Local paths (ignored by git) ----
    data_dir: Path
    media_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskpad").strip() or "taskpad"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)
        dark_mode = _env_bool(_k("DARK_MODE"), False)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskpad"))
        media_dir = _env_path(_k("MEDIA_DIR"), Path("."))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            dark_mode=dark_mode,
            data_dir=data_dir,
            media_dir=media_dir,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load settings once (reading .env first) and reuse them afterwards."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
