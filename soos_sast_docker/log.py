"""
Console logging for the entrypoint.

Everything logs through the ``soos_sast_docker`` package logger, rendered
by rich on stderr.
"""

import logging
from typing import Dict

from rich.console import Console
from rich.logging import RichHandler

from soos_sast_docker.core.enums import LogLevel

PACKAGE_LOGGER = "soos_sast_docker"

LOG_LEVELS: Dict[LogLevel, int] = {
    LogLevel.PASS: logging.INFO,
    LogLevel.IGNORE: logging.INFO,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.FAIL: logging.ERROR,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.DEBUG: logging.DEBUG,
}


def to_logging_level(level: LogLevel) -> int:
    return LOG_LEVELS.get(level, logging.INFO)


def configure_logging(level: LogLevel = LogLevel.INFO) -> logging.Logger:
    """
    Install a single rich handler on the package logger at ``level``.

    Calling it again replaces the previous handler.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(to_logging_level(level))
    return logger
