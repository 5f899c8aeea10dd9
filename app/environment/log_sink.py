"""Loguru-backed log sink and process-level logging setup."""

from __future__ import annotations

import sys

from loguru import logger

from .interfaces import InfoLogSinkPort

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


class LoguruInfoLogSink(InfoLogSinkPort):
    """Log sink that forwards informational records to loguru."""

    def __init__(self, component: str = "environment"):
        """Initialize sink with a bound component label.

        Args:
            component: Label bound to every record as `extra["component"]`.

        Raises:
            ValueError: Raised when component is blank.
        """

        if not component or not component.strip():
            raise ValueError("component must not be blank")
        self._logger = logger.bind(component=component.strip())

    def record(self, message: str) -> None:
        self._logger.info(message)


def logging_configure(level: str) -> None:
    """Replace loguru default handlers with one stderr handler.

    Args:
        level: Minimum loguru level name, for example `INFO`.

    Returns:
        None: Global loguru handlers are replaced as a side effect.

    Raises:
        ValueError: Raised by loguru when level is unknown.
    """

    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
