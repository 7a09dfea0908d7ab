"""
Logging configuration
"""

import logging
import sys
from typing import Optional

from core.config import settings

# Driver and ORM loggers that are far too chatty at INFO during a bulk load
NOISY_LOGGERS = (
    "sqlalchemy.engine",
    "sqlalchemy.pool",
    "aiosqlite",
    "aiomysql",
    "asyncpg",
)


def setup_logging(level: Optional[str] = None):
    """
    Configure logging for a migration run.

    ``level`` overrides LOG_LEVEL from the environment. Any handlers left
    over from an earlier call are replaced, so scripts may call this once
    per invocation.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    logging.getLogger(__name__).debug(f"Logging configured at {level_name} level")
