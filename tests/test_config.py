from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from taskdeck import config
from taskdeck.config import Settings
from taskdeck.infra import logging as logging_setup


def test_settings_default_to_local_sqlite(monkeypatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = Settings.from_env()

    assert settings.database_url.startswith("sqlite:///")
    assert settings.database_url.endswith(config.DEFAULT_DB_FILE)
    assert settings.log_level == "INFO"


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "  postgresql://deck@localhost/tasks  ")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_DIR", "var/log")

    settings = Settings.from_env()

    assert settings.database_url == "postgresql://deck@localhost/tasks"
    assert settings.log_level == "debug"
    assert settings.log_dir == "var/log"


@pytest.fixture
def bare_root_logger():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    for handler in saved_handlers:
        root.removeHandler(handler)
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


def test_setup_logging_attaches_rotating_file_handler(monkeypatch, tmp_path, bare_root_logger) -> None:
    monkeypatch.setattr(logging_setup, "PROJECT_ROOT", tmp_path)

    logging_setup.setup_logging("warning")

    log_path = tmp_path / config.SETTINGS.log_dir / config.SETTINGS.log_file
    file_handlers = [h for h in bare_root_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert [Path(h.baseFilename) for h in file_handlers] == [log_path]
    assert any(type(h) is logging.StreamHandler for h in bare_root_logger.handlers)
    assert bare_root_logger.level == logging.WARNING
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


def test_setup_logging_replaces_earlier_handlers(monkeypatch, tmp_path, bare_root_logger) -> None:
    monkeypatch.setattr(logging_setup, "PROJECT_ROOT", tmp_path)
    stale = logging.StreamHandler()
    bare_root_logger.addHandler(stale)

    logging_setup.setup_logging("debug")

    assert stale not in bare_root_logger.handlers
    assert bare_root_logger.level == logging.DEBUG
