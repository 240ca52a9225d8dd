"""
Logging setup.

Library modules only create loggers under the ``fsf_freedom`` namespace.
Applications that want the provider's log output on stdout call
setup_logging, which attaches one handler to the package logger and
leaves the root logger alone.
"""

import logging
import sys
from typing import IO, Optional


PACKAGE_LOGGER = "fsf_freedom"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HANDLER_NAME = "fsf_freedom.stdout"


def _level_number(level: str) -> int:
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise ValueError(f"Unknown log level: {level}")
    return number


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None
) -> logging.Logger:
    """
    Send the package's log records to stdout.

    Calling it again replaces the handler from the previous call, so
    the level or format can be changed at runtime without duplicating
    output.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        format_string: Custom format string (uses default if None)
        stream: Output stream (sys.stdout if None)

    Returns:
        The configured package logger

    Raises:
        ValueError: If the level name is not a known logging level
    """
    numeric_level = _level_number(level)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(numeric_level)
    return package_logger
