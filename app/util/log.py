"""
Logging setup for the station ledger.

Call setup_logging() once at startup; modules take child loggers from
get_logger() so they share the handlers configured here.
"""
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from app.config import settings

ROOT_LOGGER = "station_ledger"


def setup_logging(log_level: Optional[str] = None, log_dir: Optional[str] = None) -> logging.Logger:
    """
    Configure the station_ledger logger.

    Args:
        log_level: DEBUG, INFO, WARNING, ... (defaults to settings.LOG_LEVEL)
        log_dir: directory for a rotating ledger.log (defaults to settings.LOG_DIR,
            no file logging when unset)

    Returns:
        The configured root logger of the application
    """
    level = getattr(logging, (log_level or settings.LOG_LEVEL).upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)

    target = log_dir or settings.LOG_DIR
    if target:
        path = Path(target)
        path.mkdir(exist_ok=True, parents=True)
        file_handler = logging.handlers.RotatingFileHandler(
            path / "ledger.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
