"""
Pattern model.

The six pattern node types form a closed union. Nodes are frozen dataclasses
that check their structural invariants on construction and raise
MalformedPatternError when one is violated, so the matcher can assume every
node it sees is well formed.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from .errors import ErrorCode, ErrorContext, MalformedPatternError, describe_node
from .values import is_key

Key = Any  # str | int | float | Atom | Enum member, see is_key()
Predicate = Callable[[Any], Any]


def _check_predicate(predicate: Any, owner: str) -> None:
    if predicate is not None and not callable(predicate):
        raise MalformedPatternError(
            f"{owner} predicate must be callable, got {type(predicate).__name__}",
            code=ErrorCode.INVALID_PREDICATE,
            context=ErrorContext(operation="construct", component=owner),
        )


def _check_children(children: tuple, owner: str) -> None:
    for index, child in enumerate(children):
        if not isinstance(child, PATTERN_TYPES):
            raise MalformedPatternError(
                f"{owner} child {index} is not a pattern node: {describe_node(child)}",
                code=ErrorCode.INVALID_PATTERN_NODE,
                user_message="Pattern children must be pattern nodes; use compile_pattern() for plain data.",
                context=ErrorContext(operation="construct", component=owner),
            )


@dataclass(frozen=True)
class AnonymousPlaceholder:
    """Matches any value, optionally gated by a predicate, capturing nothing."""

    predicate: Predicate | None = None

    def __post_init__(self) -> None:
        _check_predicate(self.predicate, "AnonymousPlaceholder")


@dataclass(frozen=True)
class NamedPlaceholder:
    """Matches any value, optionally gated by a predicate, capturing it as ``name``."""

    name: Key
    predicate: Predicate | None = None

    def __post_init__(self) -> None:
        if not is_key(self.name):
            raise MalformedPatternError(
                f"Placeholder name must be a str, number or atom, got {self.name!r}",
                code=ErrorCode.INVALID_PLACEHOLDER_NAME,
                context=ErrorContext(operation="construct", component="NamedPlaceholder"),
            )
        _check_predicate(self.predicate, "NamedPlaceholder")


@dataclass(frozen=True)
class SequencePattern:
    """Matches a prefix of a sequence element by element."""

    elements: tuple[Pattern, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))
        _check_children(self.elements, "SequencePattern")

    def __len__(self) -> int:
        return len(self.elements)


@dataclass(frozen=True)
class RecordPattern:
    """Matches a subset of a record's fields, in declaration order."""

    fields: tuple[tuple[Key, Pattern], ...] = ()

    def __post_init__(self) -> None:
        pairs = tuple((key, sub) for key, sub in self.fields)
        seen: set = set()
        for key, _ in pairs:
            if not is_key(key):
                raise MalformedPatternError(
                    f"Record key must be a str, number or atom, got {key!r}",
                    code=ErrorCode.INVALID_RECORD_KEY,
                    context=ErrorContext(operation="construct", component="RecordPattern"),
                )
            if key in seen:
                raise MalformedPatternError(
                    f"Duplicate record key {key!r}",
                    code=ErrorCode.DUPLICATE_RECORD_KEY,
                    context=ErrorContext(operation="construct", component="RecordPattern"),
                )
            seen.add(key)
        object.__setattr__(self, "fields", pairs)
        _check_children(tuple(sub for _, sub in pairs), "RecordPattern")

    @classmethod
    def from_mapping(cls, mapping: Mapping[Key, Pattern]) -> RecordPattern:
        """Build from a mapping, keeping its iteration order."""
        return cls(tuple(mapping.items()))

    def keys(self) -> list[Key]:
        return [key for key, _ in self.fields]


@dataclass(frozen=True)
class TemplateString:
    """Matches a string made of fixed literal fragments and pattern-matched gaps.

    ``literals`` always holds one more entry than ``subpatterns``: the string
    must start with ``literals[0]``, end with ``literals[-1]`` and contain
    the inner literals in order, with gap ``i`` matched against
    ``subpatterns[i]``.
    """

    literals: tuple[str, ...]
    subpatterns: tuple[Pattern, ...] = ()
    greedy: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "literals", tuple(self.literals))
        object.__setattr__(self, "subpatterns", tuple(self.subpatterns))
        object.__setattr__(self, "greedy", bool(self.greedy))

        for index, literal in enumerate(self.literals):
            if not isinstance(literal, str):
                raise MalformedPatternError(
                    f"Template literal {index} must be str, got {type(literal).__name__}",
                    code=ErrorCode.INVALID_TEMPLATE_LITERAL,
                    context=ErrorContext(operation="construct", component="TemplateString"),
                )
        if len(self.literals) != len(self.subpatterns) + 1:
            raise MalformedPatternError(
                f"Template has {len(self.literals)} literals for "
                f"{len(self.subpatterns)} subpatterns; expected "
                f"{len(self.subpatterns) + 1}",
                code=ErrorCode.TEMPLATE_ARITY_MISMATCH,
                user_message="Template literal and placeholder counts do not line up.",
                context=ErrorContext(operation="construct", component="TemplateString"),
            )
        _check_children(self.subpatterns, "TemplateString")


@dataclass(frozen=True)
class LiteralPattern:
    """Matches a single value under strict equality (identity for objects)."""

    value: Any = field(default=None)

    def __post_init__(self) -> None:
        if type(self.value) in (list, tuple, dict):
            raise MalformedPatternError(
                f"Plain {type(self.value).__name__} cannot be a literal; "
                "use SequencePattern/RecordPattern or compile_pattern()",
                code=ErrorCode.CONTAINER_LITERAL,
                context=ErrorContext(operation="construct", component="LiteralPattern"),
            )


Pattern = Union[
    AnonymousPlaceholder,
    NamedPlaceholder,
    SequencePattern,
    RecordPattern,
    TemplateString,
    LiteralPattern,
]

PATTERN_TYPES: tuple[type, ...] = (
    AnonymousPlaceholder,
    NamedPlaceholder,
    SequencePattern,
    RecordPattern,
    TemplateString,
    LiteralPattern,
)


def is_pattern(obj: Any) -> bool:
    """Check whether ``obj`` is already a pattern node."""
    return isinstance(obj, PATTERN_TYPES)
