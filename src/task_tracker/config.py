# src/task_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app.
- Only the entrypoint reads settings; the store and interpreter get plain
  arguments.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASK_TRACKER"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local data paths ----
    tasks_path: Path
    data_dir: Path

    # ---- Console ----
    show_help_on_start: bool

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "task-tracker"),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").upper(),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), False),
            tasks_path=_env_path(_k("TASKS_PATH"), Path("tasks.json")),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/task_tracker")),
            show_help_on_start=_env_bool(_k("SHOW_HELP"), True),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Real environment variables win over .env entries.
    load_dotenv(override=False)
    return Settings.from_env()
