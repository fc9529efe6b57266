"""
Logging utility for shapematch.

shapematch is a library, so its log output is disabled by default and left
to the host application to turn on:

- set ``SHAPEMATCH_DEBUG=true`` before import, or
- call :func:`enable_debug_logging` at runtime.

Modules log through the shared loguru ``logger`` exported here.
"""

import os
import sys

from loguru import logger as loguru_logger

from shapematch.constants import ENV_DEBUG, TRUTHY_ENV_VALUES

_PACKAGE = "shapematch"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return os.environ.get(ENV_DEBUG, "").lower() in TRUTHY_ENV_VALUES


def enable_debug_logging(sink=sys.stderr, level: str = "DEBUG") -> int:
    """Enable shapematch log output and attach a sink.

    Args:
        sink: Any loguru sink (stream, path, callable).
        level: Minimum level for the new sink.

    Returns:
        Handler id, usable with ``logger.remove()``.
    """
    loguru_logger.enable(_PACKAGE)
    return loguru_logger.add(
        sink,
        level=level,
        filter=_PACKAGE,
        format="{time:HH:mm:ss.SSS} | {level: <7} | {name}:{function} - {message}",
    )


def disable_logging() -> None:
    """Silence shapematch log output."""
    loguru_logger.disable(_PACKAGE)


def configure_default_logging() -> None:
    """Apply the import-time default: silent unless debug is enabled."""
    if is_debug_enabled():
        loguru_logger.enable(_PACKAGE)
    else:
        loguru_logger.disable(_PACKAGE)


# Export loguru logger for direct use
logger = loguru_logger
