"""
Phase 1 Tests: Pattern Model

These tests verify that pattern nodes are immutable and reject structurally
invalid shapes when constructed.
"""

from dataclasses import FrozenInstanceError

import pytest

from shapematch.types import (
    AnonymousPlaceholder,
    Atom,
    ErrorCode,
    LiteralPattern,
    MalformedPatternError,
    NamedPlaceholder,
    RecordPattern,
    SequencePattern,
    TemplateString,
    is_pattern,
)
from tests.conftest import Point


class TestPlaceholders:
    """Tests for placeholder nodes."""

    def test_anonymous_defaults(self):
        node = AnonymousPlaceholder()
        assert node.predicate is None

    @pytest.mark.parametrize("name", ["x", 0, 2.5, Atom("x")])
    def test_named_accepts_keys(self, name):
        assert NamedPlaceholder(name).name is name

    @pytest.mark.parametrize("name", [None, True, ["x"], ("x",)])
    def test_named_rejects_non_keys(self, name):
        with pytest.raises(MalformedPatternError) as exc_info:
            NamedPlaceholder(name)
        assert exc_info.value.code == ErrorCode.INVALID_PLACEHOLDER_NAME

    def test_predicate_must_be_callable(self):
        with pytest.raises(MalformedPatternError) as exc_info:
            NamedPlaceholder("x", predicate="not callable")
        assert exc_info.value.code == ErrorCode.INVALID_PREDICATE

        with pytest.raises(MalformedPatternError):
            AnonymousPlaceholder(predicate=42)

    def test_frozen(self):
        node = NamedPlaceholder("x")
        with pytest.raises(FrozenInstanceError):
            node.name = "y"  # type: ignore[misc]

    def test_equal_nodes_compare_equal(self):
        assert NamedPlaceholder("x") == NamedPlaceholder("x")
        assert NamedPlaceholder("x", str.isdigit) == NamedPlaceholder("x", str.isdigit)
        assert NamedPlaceholder("x") != NamedPlaceholder("y")


class TestSequencePattern:
    """Tests for SequencePattern."""

    def test_elements_become_tuple(self):
        node = SequencePattern([LiteralPattern(1), NamedPlaceholder("x")])
        assert node.elements == (LiteralPattern(1), NamedPlaceholder("x"))
        assert len(node) == 2

    def test_rejects_plain_children(self):
        with pytest.raises(MalformedPatternError) as exc_info:
            SequencePattern((1, 2))
        assert exc_info.value.code == ErrorCode.INVALID_PATTERN_NODE


class TestRecordPattern:
    """Tests for RecordPattern."""

    def test_from_mapping_keeps_order(self):
        node = RecordPattern.from_mapping(
            {"b": NamedPlaceholder("b"), "a": NamedPlaceholder("a")}
        )
        assert node.keys() == ["b", "a"]

    def test_rejects_duplicate_keys(self):
        with pytest.raises(MalformedPatternError) as exc_info:
            RecordPattern((("a", AnonymousPlaceholder()), ("a", AnonymousPlaceholder())))
        assert exc_info.value.code == ErrorCode.DUPLICATE_RECORD_KEY

    def test_rejects_invalid_keys(self):
        with pytest.raises(MalformedPatternError) as exc_info:
            RecordPattern(((None, AnonymousPlaceholder()),))
        assert exc_info.value.code == ErrorCode.INVALID_RECORD_KEY

    def test_rejects_plain_children(self):
        with pytest.raises(MalformedPatternError):
            RecordPattern((("a", {"b": 1}),))


class TestTemplateString:
    """Tests for TemplateString invariants."""

    def test_valid_template(self):
        node = TemplateString(["hello ", ""], [NamedPlaceholder("name")])
        assert node.literals == ("hello ", "")
        assert node.greedy is False

    def test_pure_literal_template(self):
        node = TemplateString(["hello "], [])
        assert node.subpatterns == ()

    @pytest.mark.parametrize(
        "literals, subpatterns",
        [
            ([], []),
            (["a"], [NamedPlaceholder("x")]),
            (["a", "b", "c"], [NamedPlaceholder("x")]),
        ],
    )
    def test_arity_mismatch(self, literals, subpatterns):
        with pytest.raises(MalformedPatternError) as exc_info:
            TemplateString(literals, subpatterns)
        assert exc_info.value.code == ErrorCode.TEMPLATE_ARITY_MISMATCH

    def test_literals_must_be_strings(self):
        with pytest.raises(MalformedPatternError) as exc_info:
            TemplateString(["a", 1], [NamedPlaceholder("x")])
        assert exc_info.value.code == ErrorCode.INVALID_TEMPLATE_LITERAL


class TestLiteralPattern:
    """Tests for LiteralPattern."""

    @pytest.mark.parametrize("value", [[1], (1,), {"a": 1}, [], {}])
    def test_rejects_plain_containers(self, value):
        with pytest.raises(MalformedPatternError) as exc_info:
            LiteralPattern(value)
        assert exc_info.value.code == ErrorCode.CONTAINER_LITERAL

    def test_accepts_container_subclasses(self):
        """Only plain containers are structural; subclasses are objects."""
        assert LiteralPattern(Point(1, 2)).value == (1, 2)

    def test_is_pattern(self):
        assert is_pattern(LiteralPattern(1)) is True
        assert is_pattern(1) is False
        assert is_pattern([NamedPlaceholder("x")]) is False
