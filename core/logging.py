"""
Logging configuration for the import scripts
"""

import logging
import sys
from typing import Optional

from core.config import settings

# Loggers that report every statement or driver call at INFO/DEBUG
QUIET_LOGGERS = (
    "sqlalchemy.engine",
    "sqlalchemy.pool",
    "aiosqlite",
    "asyncpg",
)


def setup_logging(level: Optional[str] = None) -> int:
    """
    Configure the root logger for one import run.

    Args:
        level: Level name overriding settings.LOG_LEVEL

    Returns:
        The numeric level applied
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # pandas reports malformed source lines through the warnings module
    logging.captureWarnings(True)

    logging.getLogger(__name__).debug(f"Logging configured at {level_name}")
    return log_level
