"""Structural matcher.

``match(pattern, value)`` decides whether ``value`` has the shape described
by ``pattern`` and returns the captured placeholder values, or None when it
does not. Exactly one rule applies per pattern node:

- AnonymousPlaceholder / NamedPlaceholder: any value passing the predicate
- TemplateString: strings only, split by the template decomposer
- SequencePattern: sequences at least as long as the pattern (prefix match)
- RecordPattern: record-shaped values exposing every declared key
- LiteralPattern: strict equality for scalars, identity for everything else

A failure anywhere discards every capture gathered below it. Predicate
faults and depth-budget overruns are raised, never reported as a failure.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from shapematch.config import DEFAULT_CONFIG, MatchConfig
from shapematch.types.errors import (
    ErrorCode,
    ErrorContext,
    MalformedPatternError,
    MatchDepthExceededError,
    PredicateFaultError,
    ShapeMatchError,
    describe_node,
)
from shapematch.types.patterns import (
    AnonymousPlaceholder,
    LiteralPattern,
    NamedPlaceholder,
    Pattern,
    RecordPattern,
    SequencePattern,
    TemplateString,
)
from shapematch.types.values import (
    ValueKind,
    classify_value,
    get_field,
    has_field,
    is_record_shaped,
    strict_equal,
)
from shapematch.utils.logger import logger

from .builders import compile_pattern
from .merger import Captures, merge_all
from .decomposer import match_template


class Matcher:
    """A compiled pattern that can be matched against many values.

    The pattern is converted to pattern nodes once, at construction. Matching
    keeps no state between calls, so one Matcher can be shared across
    threads.

    Usage:
        matcher = Matcher({"user": {"name": placeholder("name")}})
        matcher.match({"user": {"name": "Ada", "id": 7}})  # {"name": "Ada"}
        matcher.test({"user": None})                        # False
    """

    def __init__(self, pattern: Any, config: MatchConfig | None = None) -> None:
        """Compile ``pattern``.

        Args:
            pattern: A pattern node or plain data containing pattern nodes.
            config: Limits and policies; defaults to ``MatchConfig()``.

        Raises:
            MalformedPatternError: If the pattern is not well formed.
            MatchDepthExceededError: If the pattern nests too deeply.
        """
        self.config = config or DEFAULT_CONFIG
        self.pattern: Pattern = compile_pattern(pattern, self.config)

    def __repr__(self) -> str:
        return f"Matcher({describe_node(self.pattern)})"

    def match(self, value: Any) -> Captures | None:
        """Match a value, returning its captures or None on failure."""
        try:
            return self._match(self.pattern, value, 1)
        except RecursionError as e:
            # max_depth set above what the interpreter's stack allows
            raise MatchDepthExceededError(
                "Interpreter recursion limit reached before max_depth",
                max_depth=self.config.max_depth,
                context=ErrorContext(operation="match", component="Matcher"),
            ) from e

    def test(self, value: Any) -> bool:
        """Check whether a value matches, discarding the captures."""
        return self.match(value) is not None

    def match_all(
        self,
        values: Iterable[Any],
        limit: int | None = None,
    ) -> list[tuple[int, Captures]]:
        """Match each value in turn.

        Args:
            values: Values to test.
            limit: Stop after this many matches (None = no limit).

        Returns:
            ``(index, captures)`` for every matching value, in input order.
        """
        results = []
        if limit is not None and limit <= 0:
            return results
        for index, value in enumerate(values):
            captures = self.match(value)
            if captures is None:
                continue
            results.append((index, captures))
            if limit is not None and len(results) >= limit:
                break
        return results

    # ----- rules -----

    def _match(self, node: Pattern, value: Any, depth: int) -> Captures | None:
        if depth > self.config.max_depth:
            logger.warning(f"Match depth {depth} exceeds limit {self.config.max_depth}")
            raise MatchDepthExceededError(
                f"Pattern nesting exceeded max_depth={self.config.max_depth}",
                max_depth=self.config.max_depth,
                context=ErrorContext(
                    operation="match",
                    component="Matcher",
                    pattern=describe_node(node),
                    depth=depth,
                ),
            )

        match node:
            case AnonymousPlaceholder():
                return {} if self._accepts(node, value) else None

            case NamedPlaceholder(name=name):
                return {name: value} if self._accepts(node, value) else None

            case TemplateString():
                if classify_value(value) is not ValueKind.STRING:
                    logger.debug("Template expects a string, got {}", type(value).__name__)
                    return None
                return match_template(
                    node,
                    value,
                    lambda subpattern, gap: self._match(subpattern, gap, depth + 1),
                )

            case SequencePattern(elements=elements):
                return self._match_sequence(elements, value, depth)

            case RecordPattern(fields=fields):
                return self._match_record(fields, value, depth)

            case LiteralPattern(value=expected):
                if strict_equal(expected, value):
                    return {}
                return None

            case _:
                raise MalformedPatternError(
                    f"Unknown pattern node: {describe_node(node)}",
                    code=ErrorCode.INVALID_PATTERN_NODE,
                    context=ErrorContext(operation="match", component="Matcher", depth=depth),
                )

    def _match_sequence(
        self, elements: tuple[Pattern, ...], value: Any, depth: int
    ) -> Captures | None:
        if classify_value(value) is not ValueKind.SEQUENCE:
            logger.debug("Sequence pattern expects a sequence, got {}", type(value).__name__)
            return None
        if len(value) < len(elements):
            logger.debug("Sequence too short: {} < {}", len(value), len(elements))
            return None

        partials = []
        for index, element in enumerate(elements):
            partial = self._match(element, value[index], depth + 1)
            if partial is None:
                logger.debug("Sequence element {} did not match", index)
                return None
            partials.append(partial)
        return merge_all(partials)

    def _match_record(
        self, fields: tuple[tuple[Any, Pattern], ...], value: Any, depth: int
    ) -> Captures | None:
        kind = classify_value(value)
        if not is_record_shaped(value, kind):
            logger.debug("Record pattern expects a record-shaped value, got {}", kind.value)
            return None

        partials = []
        for key, subpattern in fields:
            if not has_field(value, key, kind):
                logger.debug("Record is missing key {!r}", key)
                return None
            partial = self._match(subpattern, get_field(value, key, kind), depth + 1)
            if partial is None:
                logger.debug("Record field {!r} did not match", key)
                return None
            partials.append(partial)
        return merge_all(partials)

    def _accepts(self, node: AnonymousPlaceholder | NamedPlaceholder, value: Any) -> bool:
        """Run a placeholder's predicate, if any."""
        predicate = node.predicate
        if predicate is None:
            return True

        try:
            verdict = predicate(value)
            if isinstance(verdict, bool):
                return verdict
            if not self.config.strict_predicates:
                return bool(verdict)
        except (ShapeMatchError, RecursionError):
            raise
        except Exception as e:
            logger.warning(f"Predicate {_predicate_name(predicate)} raised {type(e).__name__}: {e}")
            raise PredicateFaultError(
                f"Predicate {_predicate_name(predicate)} raised {type(e).__name__}: {e}",
                context=ErrorContext(
                    operation="match",
                    component="Matcher",
                    pattern=describe_node(node),
                ),
                original_error=e,
            ) from e

        raise PredicateFaultError(
            f"Predicate {_predicate_name(predicate)} returned "
            f"{type(verdict).__name__}, expected bool",
            code=ErrorCode.PREDICATE_NOT_BOOLEAN,
            context=ErrorContext(
                operation="match",
                component="Matcher",
                pattern=describe_node(node),
                additional_info={"returned": repr(verdict)[:80]},
            ),
        )


def _predicate_name(predicate: Any) -> str:
    return getattr(predicate, "__qualname__", None) or repr(predicate)


def match(pattern: Any, value: Any, config: MatchConfig | None = None) -> Captures | None:
    """Match ``value`` against ``pattern``.

    Args:
        pattern: A pattern node or plain data containing pattern nodes.
        value: Any value.
        config: Limits and policies; defaults to ``MatchConfig()``.

    Returns:
        Mapping of placeholder names to captured values, or None if the
        value does not match.

    Raises:
        MalformedPatternError: If the pattern is not well formed.
        PredicateFaultError: If a placeholder predicate raises.
        MatchDepthExceededError: If the pattern nests deeper than allowed.
    """
    return Matcher(pattern, config).match(value)


def matches(pattern: Any, value: Any, config: MatchConfig | None = None) -> bool:
    """Check whether ``value`` matches ``pattern``."""
    return Matcher(pattern, config).test(value)
