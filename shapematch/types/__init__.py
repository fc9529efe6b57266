"""
shapematch type definitions.

This module exports the value model, the pattern node types and the error
types.
"""

# Value model
from .values import (
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

# Pattern model
from .patterns import (
    PATTERN_TYPES,
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

# Error types
from .errors import (
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    MalformedPatternError,
    MatchDepthExceededError,
    PredicateFaultError,
    ShapeMatchError,
)

__all__ = [
    # Value model
    "MISSING",
    "Atom",
    "ValueKind",
    "classify_value",
    "get_field",
    "has_field",
    "is_key",
    "is_record_shaped",
    "strict_equal",
    # Pattern model
    "PATTERN_TYPES",
    "AnonymousPlaceholder",
    "Key",
    "LiteralPattern",
    "NamedPlaceholder",
    "Pattern",
    "Predicate",
    "RecordPattern",
    "SequencePattern",
    "TemplateString",
    "is_pattern",
    # Error types
    "ErrorCode",
    "ErrorSeverity",
    "ErrorContext",
    "ShapeMatchError",
    "MalformedPatternError",
    "PredicateFaultError",
    "MatchDepthExceededError",
    "ConfigurationError",
]
