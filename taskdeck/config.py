from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_DB_FILE = "taskdeck.db"


def _resolve_project_root() -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


PROJECT_ROOT = _resolve_project_root()


def _first_existing(name: str) -> Path | None:
    for base in (Path.cwd(), PROJECT_ROOT):
        candidate = base / name
        if candidate.exists():
            return candidate
    return None


def load_env() -> None:
    """Load ``.env`` then let ``.env.<APP_ENV>`` override it."""
    base_env = _first_existing(".env")
    if base_env:
        load_dotenv(base_env)

    env_name = os.getenv("APP_ENV", "development")
    specific = _first_existing(f".env.{env_name}")
    if specific:
        load_dotenv(specific, override=True)


@dataclass(frozen=True)
class Settings:
    database_url: str
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_file: str = "taskdeck.log"

    @classmethod
    def from_env(cls) -> Settings:
        database_url = os.getenv("DATABASE_URL", "").strip()
        if not database_url:
            database_url = f"sqlite:///{(PROJECT_ROOT / DEFAULT_DB_FILE).as_posix()}"
        return cls(
            database_url=database_url,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_dir=os.getenv("LOG_DIR", "logs"),
            log_file=os.getenv("LOG_FILE", "taskdeck.log"),
        )


load_env()

SETTINGS = Settings.from_env()
