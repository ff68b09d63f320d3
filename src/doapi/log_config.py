# doapi/log_config.py
"""Loguru set-up for applications embedding the doapi client.

Every doapi module logs through the shared Loguru `logger`. Request lines are
emitted at DEBUG, API errors at WARNING and failed exchanges at ERROR; bearer
tokens are never part of a record. `configure_logging` is meant to be called
once by the application.
"""

import sys
from typing import Any

from loguru import logger

PACKAGE_NAME = "doapi"

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(
    level: str = "INFO", sink: Any = sys.stderr, *, doapi_only: bool = False
) -> int:
    """Replace Loguru's handlers with a single formatted sink.

    Args:
        level: The minimum logging level (e.g., "DEBUG", "INFO", "WARNING").
        sink: The output sink (e.g., sys.stderr, "doapi.log").
        doapi_only: Only pass records emitted from the `doapi` package, so a
            DEBUG level shows the client's request traffic and nothing else.

    Returns:
        int: The id of the handler that was added.
    """
    level = level.upper()
    logger.remove()
    handler_id = logger.add(
        sink,
        level=level,
        format=LOG_FORMAT,
        filter=PACKAGE_NAME if doapi_only else None,
        colorize=sink is sys.stderr,
        backtrace=True,
        diagnose=False,
    )
    logger.debug(f"doapi logging configured: level={level}, doapi_only={doapi_only}")
    return handler_id
