from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from taskdeck.config import SETTINGS, PROJECT_ROOT

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None) -> None:
    log_dir = PROJECT_ROOT / SETTINGS.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [
        RotatingFileHandler(log_dir / SETTINGS.log_file, maxBytes=2_000_000, backupCount=3),
        logging.StreamHandler(),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(
        level=(level or SETTINGS.log_level).upper(), handlers=handlers, force=True
    )
    # SQL echo is only useful when explicitly asked for.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
