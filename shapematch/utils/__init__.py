"""
shapematch utility modules.

- Logging (loguru, silent unless enabled)
- Argument validation
"""

from .logger import (
    configure_default_logging,
    disable_logging,
    enable_debug_logging,
    is_debug_enabled,
    logger,
)
from .validation import (
    parse_bool,
    parse_positive_integer,
    validate_positive_integer,
)

__all__ = [
    # Logger
    "configure_default_logging",
    "disable_logging",
    "enable_debug_logging",
    "is_debug_enabled",
    "logger",
    # Validation
    "parse_bool",
    "parse_positive_integer",
    "validate_positive_integer",
]
