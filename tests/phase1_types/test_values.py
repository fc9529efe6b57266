"""
Phase 1 Tests: Value Model

These tests verify that host values are classified into exactly one kind,
and that field access and literal comparison follow those kinds.
"""

import pickle
from collections import OrderedDict
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from types import MappingProxyType

import pytest

from shapematch.types import (
    MISSING,
    Atom,
    ValueKind,
    classify_value,
    get_field,
    has_field,
    is_key,
    is_record_shaped,
    strict_equal,
)
from tests.conftest import Point, User


class Color(Enum):
    RED = 1
    GREEN = 2


class TestClassifyValue:
    """Tests for classify_value."""

    @pytest.mark.parametrize(
        "value, kind",
        [
            (None, ValueKind.NULL),
            (MISSING, ValueKind.MISSING),
            (True, ValueKind.BOOLEAN),
            (False, ValueKind.BOOLEAN),
            (0, ValueKind.NUMBER),
            (1.5, ValueKind.NUMBER),
            (2j, ValueKind.NUMBER),
            (Fraction(1, 3), ValueKind.NUMBER),
            (Decimal("1.1"), ValueKind.NUMBER),
            ("", ValueKind.STRING),
            ("text", ValueKind.STRING),
            (Atom("a"), ValueKind.ATOM),
            (Color.RED, ValueKind.ATOM),
            ({}, ValueKind.RECORD),
            (OrderedDict(a=1), ValueKind.RECORD),
            (MappingProxyType({"a": 1}), ValueKind.RECORD),
            ([], ValueKind.SEQUENCE),
            ((1, 2), ValueKind.SEQUENCE),
            (range(3), ValueKind.SEQUENCE),
            (Point(1, 2), ValueKind.SEQUENCE),
            (b"bytes", ValueKind.OPAQUE),
            (bytearray(b"x"), ValueKind.OPAQUE),
            ({1, 2}, ValueKind.OPAQUE),
            (object(), ValueKind.OPAQUE),
            (len, ValueKind.OPAQUE),
            (User("a", 1), ValueKind.OPAQUE),
        ],
    )
    def test_kinds(self, value, kind):
        assert classify_value(value) is kind

    def test_bool_is_not_a_number(self):
        """bool is checked before Number even though it subclasses int."""
        assert classify_value(True) is not ValueKind.NUMBER


class TestMissing:
    """Tests for the MISSING sentinel."""

    def test_singleton(self):
        assert type(MISSING)() is MISSING

    def test_distinct_from_none(self):
        assert MISSING is not None
        assert classify_value(MISSING) is not classify_value(None)

    def test_falsy_and_repr(self):
        assert not MISSING
        assert repr(MISSING) == "MISSING"

    def test_survives_pickle(self):
        assert pickle.loads(pickle.dumps(MISSING)) is MISSING


class TestAtom:
    """Tests for Atom identity tokens."""

    def test_same_name_atoms_are_distinct(self):
        assert Atom("red") != Atom("red")

    def test_atom_equals_itself(self):
        red = Atom("red")
        assert red == red
        assert hash(red) == hash(red)

    def test_repr(self):
        assert repr(Atom("red")) == "Atom('red')"


class TestIsKey:
    """Tests for is_key."""

    @pytest.mark.parametrize("key", ["a", "", 0, 7, 1.5, Atom("k"), Color.GREEN])
    def test_valid_keys(self, key):
        assert is_key(key) is True

    @pytest.mark.parametrize("key", [None, True, (1,), [1], 1j, MISSING, object()])
    def test_invalid_keys(self, key):
        assert is_key(key) is False


class TestFieldAccess:
    """Tests for is_record_shaped, has_field and get_field."""

    @pytest.mark.parametrize("value", [None, MISSING, True, 3, "abc", Atom("a")])
    def test_scalars_are_not_record_shaped(self, value):
        assert is_record_shaped(value) is False

    @pytest.mark.parametrize("value", [{}, [], User("a", 1), len])
    def test_containers_and_objects_are_record_shaped(self, value):
        assert is_record_shaped(value) is True

    def test_mapping_membership(self):
        assert has_field({"a": None}, "a") is True
        assert has_field({"a": None}, "b") is False
        assert get_field({"a": None}, "a") is None

    def test_sequence_indexes(self):
        items = ["x", "y"]
        assert has_field(items, 0) is True
        assert has_field(items, 1) is True
        assert has_field(items, 2) is False
        assert has_field(items, -1) is False
        assert has_field(items, True) is False
        assert get_field(items, 1) == "y"

    def test_sequence_attributes(self):
        point = Point(3, 4)
        assert has_field(point, "x") is True
        assert get_field(point, "y") == 4

    def test_object_attributes(self):
        user = User("Ada", 36)
        assert has_field(user, "name") is True
        assert has_field(user, "missing") is False
        assert has_field(user, 0) is False
        assert get_field(user, "age") == 36

    def test_string_attributes_are_not_fields(self):
        """Strings are scalars even though they have methods."""
        assert has_field("abc", "upper") is False


class TestStrictEqual:
    """Tests for strict_equal."""

    def test_numbers_compare_by_value(self):
        assert strict_equal(1, 1.0) is True
        assert strict_equal(Fraction(1, 2), 0.5) is True
        assert strict_equal(1, 2) is False

    def test_bool_never_equals_number(self):
        assert strict_equal(True, 1) is False
        assert strict_equal(0, False) is False
        assert strict_equal(True, True) is True

    def test_nan_never_equals_itself(self):
        nan = float("nan")
        assert strict_equal(nan, nan) is False

    def test_strings(self):
        assert strict_equal("a", "a") is True
        assert strict_equal("a", "b") is False

    def test_null_and_missing(self):
        assert strict_equal(None, None) is True
        assert strict_equal(MISSING, MISSING) is True
        assert strict_equal(None, MISSING) is False

    def test_objects_compare_by_identity(self):
        first, second = User("Ada", 36), User("Ada", 36)
        assert first == second
        assert strict_equal(first, second) is False
        assert strict_equal(first, first) is True

    def test_atoms_and_enums(self):
        token = Atom("t")
        assert strict_equal(token, token) is True
        assert strict_equal(token, Atom("t")) is False
        assert strict_equal(Color.RED, Color.RED) is True
        assert strict_equal(Color.RED, 1) is False

    def test_bytes_compare_by_value(self):
        assert strict_equal(bytes([97, 98]), b"ab") is True
        assert strict_equal(b"ab", b"ba") is False
        assert strict_equal(b"ab", "ab") is False

    def test_bytearray_compares_by_identity(self):
        buffer = bytearray(b"ab")
        assert strict_equal(buffer, buffer) is True
        assert strict_equal(buffer, bytearray(b"ab")) is False
        assert strict_equal(buffer, b"ab") is False

