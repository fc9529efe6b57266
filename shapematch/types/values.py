"""
Value model.

Every host value handed to the matcher is classified exactly once into a
ValueKind, so matching rules never need ad-hoc type inspection. Record-style
field access and literal comparison are defined here in terms of those kinds.
"""

from collections.abc import Mapping, Sequence
from enum import Enum
from numbers import Number
from typing import Any


class ValueKind(str, Enum):
    """Tag of a classified value."""

    NULL = "null"
    MISSING = "missing"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ATOM = "atom"
    SEQUENCE = "sequence"
    RECORD = "record"
    OPAQUE = "opaque"


# Kinds compared by value under the literal rule; everything else by identity
EQUALITY_KINDS = frozenset({ValueKind.BOOLEAN, ValueKind.NUMBER, ValueKind.STRING})

# Kinds that never expose fields
SCALAR_KINDS = frozenset(
    {
        ValueKind.NULL,
        ValueKind.MISSING,
        ValueKind.BOOLEAN,
        ValueKind.NUMBER,
        ValueKind.STRING,
        ValueKind.ATOM,
    }
)


class _MissingType:
    """Marker for an absent value, distinct from ``None``."""

    _instance = None

    def __new__(cls) -> "_MissingType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING = _MissingType()


class Atom:
    """Opaque token that is only ever equal to itself.

    Two atoms created with the same name are still different values::

        RED = Atom("red")
        assert RED != Atom("red")
    """

    __slots__ = ("name",)

    def __init__(self, name: str = "") -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Atom({self.name!r})"


_TEXT_LIKE = (str, bytes, bytearray)


def classify_value(value: Any) -> ValueKind:
    """Classify a host value into its ValueKind.

    Order matters: ``bool`` is checked before numbers, and strings/bytes
    before the generic Sequence check.
    """
    if value is None:
        return ValueKind.NULL
    if value is MISSING:
        return ValueKind.MISSING
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, Number):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (Atom, Enum)):
        return ValueKind.ATOM
    if isinstance(value, Mapping):
        return ValueKind.RECORD
    if isinstance(value, Sequence) and not isinstance(value, _TEXT_LIKE):
        return ValueKind.SEQUENCE
    return ValueKind.OPAQUE


def is_key(value: Any) -> bool:
    """Check whether a value can name a placeholder or a record field."""
    kind = classify_value(value)
    return kind in (ValueKind.STRING, ValueKind.NUMBER, ValueKind.ATOM) and not isinstance(
        value, complex
    )


def is_record_shaped(value: Any, kind: ValueKind | None = None) -> bool:
    """Check whether a value supports field lookup."""
    if kind is None:
        kind = classify_value(value)
    return kind not in SCALAR_KINDS


def has_field(value: Any, key: Any, kind: ValueKind | None = None) -> bool:
    """Check whether a record-shaped value exposes ``key``.

    Mappings use membership, sequences accept in-range integer indexes, and
    any remaining string key is looked up as an attribute.
    """
    if kind is None:
        kind = classify_value(value)
    if kind in SCALAR_KINDS:
        return False
    if kind is ValueKind.RECORD:
        return key in value
    if kind is ValueKind.SEQUENCE and isinstance(key, int) and not isinstance(key, bool):
        return 0 <= key < len(value)
    if isinstance(key, str):
        return hasattr(value, key)
    return False


def get_field(value: Any, key: Any, kind: ValueKind | None = None) -> Any:
    """Read a field previously confirmed by :func:`has_field`."""
    if kind is None:
        kind = classify_value(value)
    if kind is ValueKind.RECORD:
        return value[key]
    if kind is ValueKind.SEQUENCE and isinstance(key, int) and not isinstance(key, bool):
        return value[key]
    return getattr(value, key)


def strict_equal(left: Any, right: Any) -> bool:
    """Literal comparison: same kind, then value equality or identity.

    ``bytes`` is opaque but immutable, so it compares by value like ``str``;
    a mutable ``bytearray`` still needs identity.
    """
    kind = classify_value(left)
    if kind is not classify_value(right):
        return False
    if kind in EQUALITY_KINDS:
        return bool(left == right)
    if isinstance(left, bytes) and isinstance(right, bytes):
        return left == right
    return left is right
