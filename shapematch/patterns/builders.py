"""Pattern construction.

Patterns are usually written as plain Python data with placeholders mixed
in, and converted to pattern nodes once by :func:`compile_pattern`::

    pattern = compile_pattern({
        "method": "GET",
        "path": template("/users/", placeholder("user_id", str.isdigit)),
        "headers": {"accept": placeholder("accept")},
        "args": [placeholder(), placeholder("second")],
    })

Plain ``list``/``tuple`` become sequence patterns, plain ``dict`` becomes a
record pattern, pattern nodes pass through and every other object becomes a
literal.
"""

from __future__ import annotations

import string
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from shapematch.config import DEFAULT_CONFIG, MatchConfig
from shapematch.types.errors import (
    ErrorCode,
    ErrorContext,
    MalformedPatternError,
    MatchDepthExceededError,
)
from shapematch.types.patterns import (
    AnonymousPlaceholder,
    Key,
    LiteralPattern,
    NamedPlaceholder,
    Pattern,
    Predicate,
    RecordPattern,
    SequencePattern,
    TemplateString,
    is_pattern,
)
from shapematch.utils.logger import logger


@dataclass(frozen=True)
class InstanceOf:
    """Predicate accepting instances of the given types."""

    types: tuple[type, ...]

    def __call__(self, value: Any) -> bool:
        return isinstance(value, self.types)


def _as_predicate(predicate: Any) -> Predicate | None:
    if isinstance(predicate, type):
        return InstanceOf((predicate,))
    if (
        isinstance(predicate, tuple)
        and predicate
        and all(isinstance(item, type) for item in predicate)
    ):
        return InstanceOf(predicate)
    return predicate


def placeholder(
    name: Key | None = None,
    predicate: Predicate | type | tuple[type, ...] | None = None,
) -> AnonymousPlaceholder | NamedPlaceholder:
    """Create a placeholder.

    Args:
        name: Capture name; None creates an anonymous placeholder that
            matches without capturing.
        predicate: Optional test the matched value must pass. A type or
            tuple of types is shorthand for an ``isinstance`` check.

    Raises:
        MalformedPatternError: If the name or predicate is invalid.
    """
    test = _as_predicate(predicate)
    if name is None:
        return AnonymousPlaceholder(test)
    return NamedPlaceholder(name, test)


def template(*parts: Any, greedy: bool = False, config: MatchConfig | None = None) -> TemplateString:
    """Build a template string from interleaved text and sub-patterns.

    ``str`` parts are literal text and adjacent ones are joined; any other
    part is compiled into the sub-pattern for the next gap::

        template("Hello ", placeholder("name"), "!")

    Args:
        *parts: Literal fragments and sub-patterns, in order.
        greedy: Prefer the longest gaps instead of the shortest.
        config: Limits used when compiling sub-patterns.
    """
    literals = [""]
    subpatterns = []
    for part in parts:
        if isinstance(part, str):
            literals[-1] += part
        else:
            subpatterns.append(compile_pattern(part, config))
            literals.append("")
    return TemplateString(tuple(literals), tuple(subpatterns), greedy)


def greedy_template(*parts: Any, config: MatchConfig | None = None) -> TemplateString:
    """Same as :func:`template` with ``greedy=True``."""
    return template(*parts, greedy=True, config=config)


def _field_key(field_name: str) -> Key:
    if field_name.isascii() and field_name.isdigit():
        return int(field_name)
    return field_name


def from_format(
    fmt: str,
    greedy: bool = False,
    predicates: Mapping[str, Any] | None = None,
) -> TemplateString:
    """Build a template from a ``str.format``-style string.

    ``{name}`` becomes a named placeholder, ``{}`` an anonymous one and
    all-digit names become integer keys. ``{{`` and ``}}`` are literal
    braces::

        from_format("{name} is {age} years old", predicates={"age": str.isdigit})

    Args:
        fmt: Format string; conversions and format specs are not allowed.
        greedy: Prefer the longest gaps instead of the shortest.
        predicates: Predicates (or types) by field name.

    Raises:
        MalformedPatternError: If the format string cannot be parsed, uses a
            conversion or format spec, or ``predicates`` names an unknown field.
    """
    predicates = dict(predicates or {})
    try:
        parsed = list(string.Formatter().parse(fmt))
    except ValueError as e:
        raise MalformedPatternError(
            f"Invalid format string {fmt!r}: {e}",
            code=ErrorCode.INVALID_FORMAT_STRING,
            context=ErrorContext(operation="from_format", component="builders"),
            original_error=e,
        ) from e

    parts: list[Any] = []
    used: set[str] = set()
    for literal_text, field_name, format_spec, conversion in parsed:
        if literal_text:
            parts.append(literal_text)
        if field_name is None:
            continue
        if format_spec or conversion:
            raise MalformedPatternError(
                f"Field {field_name!r} in {fmt!r} uses a conversion or format spec",
                code=ErrorCode.INVALID_FORMAT_STRING,
                context=ErrorContext(operation="from_format", component="builders"),
            )
        used.add(field_name)
        name = _field_key(field_name) if field_name else None
        parts.append(placeholder(name, predicates.get(field_name)))

    unknown = set(predicates) - used
    if unknown:
        raise MalformedPatternError(
            f"Predicates given for fields not in {fmt!r}: {sorted(unknown)}",
            code=ErrorCode.INVALID_PREDICATE,
            context=ErrorContext(operation="from_format", component="builders"),
        )
    return template(*parts, greedy=greedy)


def compile_pattern(obj: Any, config: MatchConfig | None = None) -> Pattern:
    """Convert plain pattern data into pattern nodes.

    Args:
        obj: A pattern node, or plain lists/tuples/dicts containing them.
        config: Supplies the nesting limit.

    Raises:
        MalformedPatternError: If ``obj`` contains itself.
        MatchDepthExceededError: If ``obj`` nests deeper than ``max_depth``.
    """
    config = config or DEFAULT_CONFIG
    try:
        return _compile(obj, 1, config.max_depth, set())
    except RecursionError as e:
        # max_depth set above what the interpreter's stack allows
        raise MatchDepthExceededError(
            "Interpreter recursion limit reached before max_depth while compiling",
            max_depth=config.max_depth,
            context=ErrorContext(operation="compile", component="builders"),
        ) from e


def _compile(obj: Any, depth: int, max_depth: int, active: set[int]) -> Pattern:
    if depth > max_depth:
        logger.warning(f"Pattern nesting {depth} exceeds limit {max_depth}")
        raise MatchDepthExceededError(
            f"Pattern nesting exceeded max_depth={max_depth} while compiling",
            max_depth=max_depth,
            context=ErrorContext(operation="compile", component="builders", depth=depth),
        )

    if is_pattern(obj):
        return obj

    container = type(obj)
    if container not in (list, tuple, dict):
        return LiteralPattern(obj)

    marker = id(obj)
    if marker in active:
        raise MalformedPatternError(
            f"Pattern {container.__name__} contains itself",
            code=ErrorCode.CYCLIC_PATTERN,
            user_message="Patterns must not be self-referential.",
            context=ErrorContext(operation="compile", component="builders", depth=depth),
        )
    active.add(marker)
    try:
        if container is dict:
            return RecordPattern(
                tuple((key, _compile(sub, depth + 1, max_depth, active)) for key, sub in obj.items())
            )
        return SequencePattern(
            tuple(_compile(element, depth + 1, max_depth, active) for element in obj)
        )
    finally:
        active.discard(marker)
