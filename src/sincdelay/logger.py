"""
Logging configuration for sincdelay

All loggers live under the "sincdelay" namespace. As a library the
package installs only a NullHandler; applications opt in to output with
set_global_logging().

MIT License
"""

import logging
import sys
from typing import Optional, Union

from sincdelay.errors import InvalidArgument

PACKAGE_LOGGER = "sincdelay"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed by set_global_logging() so they can be replaced
_OWNED_ATTR = "_sincdelay_owned"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def resolve_level(level: Union[int, str]) -> int:
    """
    Convert a level name ("debug", "INFO", ...) or number to a logging level.

    Raises:
        InvalidArgument: If level is an unknown name or not a str/int
    """
    if isinstance(level, bool):
        raise InvalidArgument(f"invalid logging level {level!r}")
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        value = logging.getLevelName(level.strip().upper())
        if isinstance(value, int):
            return value
    raise InvalidArgument(f"invalid logging level {level!r}")


def set_global_logging(
    level: Union[int, str] = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Send sincdelay log records to stdout (and optionally a file).

    Handlers are attached to the package logger only; the root logger is
    left alone. Calling this again replaces the handlers from the previous
    call instead of stacking duplicates.

    Args:
        level: Logging level, by name or number
        format_string: Custom format string for log messages
        log_file: Optional file path to write logs to

    Returns:
        The package logger
    """
    log_level = resolve_level(level)
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, DEFAULT_DATEFMT)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logger = reset_logging()
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _OWNED_ATTR, True)
        logger.addHandler(handler)
    logger.setLevel(log_level)

    return logger


def reset_logging() -> logging.Logger:
    """Remove handlers installed by set_global_logging() and clear the level."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, _OWNED_ATTR, False):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.NOTSET)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger inside the sincdelay namespace.

    Module names already under the package (``__name__`` of a sincdelay
    module) are used as is; any other name becomes a child of the
    package logger, so "benchmarks" maps to "sincdelay.benchmarks".

    Args:
        name: Logger name (defaults to 'sincdelay')
    """
    if not name or name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)
    if name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
