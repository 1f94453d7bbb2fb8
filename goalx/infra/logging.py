from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from goalx.config import PROJECT_ROOT, SETTINGS

NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool")


def setup_logging(level: str | None = None) -> None:
    log_dir = PROJECT_ROOT / SETTINGS.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = RotatingFileHandler(
        log_dir / "goalx.log", maxBytes=2_000_000, backupCount=3, encoding="utf-8"
    )
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logging.basicConfig(
        level=(level or SETTINGS.log_level).upper(),
        handlers=[file_handler, console_handler],
        force=True,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.captureWarnings(True)
