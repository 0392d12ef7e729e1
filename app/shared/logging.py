"""
Logging configuration for the application.

One pipe-separated format for every logger, set up once per process
by create_app. Modules log through logging.getLogger(__name__).
Request bodies and credentials are never logged.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_QUIET_LOGGERS = ("uvicorn.access", "aiosqlite", "asyncio")


def configure_logging(level: str = "INFO", sql_echo: bool = False) -> None:
    """Configure logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        sql_echo: Keep SQLAlchemy's statement log at INFO instead of
            silencing it below WARNING.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if sql_echo else logging.WARNING
    )
