"""Matcher configuration.

MatchConfig holds the knobs that bound a match call. Defaults are safe for
untrusted patterns; ``from_env`` lets deployments adjust them without code
changes:

- ``SHAPEMATCH_MAX_DEPTH``: positive integer recursion budget
- ``SHAPEMATCH_STRICT_PREDICATES``: boolean flag
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from shapematch.constants import DEFAULT_MAX_DEPTH, ENV_MAX_DEPTH, ENV_STRICT_PREDICATES
from shapematch.types.errors import ConfigurationError, ErrorContext
from shapematch.utils.validation import (
    parse_bool,
    parse_positive_integer,
    validate_positive_integer,
)


@dataclass(frozen=True)
class MatchConfig:
    """Limits and policies applied to compiling and matching patterns."""

    # Deepest pattern nesting walked before MatchDepthExceededError
    max_depth: int = DEFAULT_MAX_DEPTH

    # Raise PredicateFaultError when a predicate returns a non-bool
    # instead of using the value's truthiness
    strict_predicates: bool = False

    def __post_init__(self) -> None:
        try:
            validate_positive_integer(self.max_depth, "max_depth")
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                str(e),
                user_message=f"Invalid max_depth: {self.max_depth!r}",
                context=ErrorContext(operation="configure", component="MatchConfig"),
                original_error=e,
            ) from e
        if not isinstance(self.strict_predicates, bool):
            raise ConfigurationError(
                f"strict_predicates must be a bool, got {type(self.strict_predicates).__name__}",
                context=ErrorContext(operation="configure", component="MatchConfig"),
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> MatchConfig:
        """Build a config from environment variables, falling back to defaults.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Raises:
            ConfigurationError: If a variable is set to an invalid value.
        """
        env = os.environ if environ is None else environ
        kwargs: dict = {}
        try:
            if env.get(ENV_MAX_DEPTH):
                kwargs["max_depth"] = parse_positive_integer(env[ENV_MAX_DEPTH], ENV_MAX_DEPTH)
            if ENV_STRICT_PREDICATES in env:
                kwargs["strict_predicates"] = parse_bool(
                    env[ENV_STRICT_PREDICATES], ENV_STRICT_PREDICATES
                )
        except ValueError as e:
            raise ConfigurationError(
                str(e),
                context=ErrorContext(
                    operation="from_env",
                    component="MatchConfig",
                    additional_info={"variables": [ENV_MAX_DEPTH, ENV_STRICT_PREDICATES]},
                ),
                original_error=e,
            ) from e
        return cls(**kwargs)


DEFAULT_CONFIG = MatchConfig()
