"""Shared constants and helpers for shapematch.

Centralizes the recursion budget defaults, the environment variable names
read by :class:`shapematch.config.MatchConfig`, and timezone-aware datetime
helpers.
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime.

    Usable directly as a ``default_factory`` in dataclass fields.
    """
    return datetime.now(timezone.utc)


# Maximum pattern nesting depth walked by the compiler and the matcher.
# Python's default recursion limit is 1000 and every level costs up to three
# frames, so this stays well under it.
DEFAULT_MAX_DEPTH: int = 200

# Environment variables understood by MatchConfig.from_env()
ENV_MAX_DEPTH: str = "SHAPEMATCH_MAX_DEPTH"
ENV_STRICT_PREDICATES: str = "SHAPEMATCH_STRICT_PREDICATES"

# Enables library log output (disabled by default)
ENV_DEBUG: str = "SHAPEMATCH_DEBUG"

# Values accepted as "true" for boolean environment variables
TRUTHY_ENV_VALUES: frozenset[str] = frozenset({"1", "true", "yes", "on"})
FALSY_ENV_VALUES: frozenset[str] = frozenset({"0", "false", "no", "off", ""})
