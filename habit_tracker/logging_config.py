import logging
from logging import Logger

from . import config


def setup_logging(level: str = config.LOG_LEVEL) -> Logger:
    """Configure root logger for the application."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("habit_tracker")
