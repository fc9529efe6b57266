"""
shapematch - structural pattern matching for Python values.

Describe the shape of a value with plain data and placeholders, then match
any value against it:

    from shapematch import match, placeholder, template

    pattern = {
        "type": "message",
        "author": {"name": placeholder("author")},
        "text": template("/roll ", placeholder("dice")),
    }
    match(pattern, {"type": "message", "author": {"name": "ada"}, "text": "/roll 2d6"})
    # {"author": "ada", "dice": "2d6"}

Sequences match by prefix, records by subset of keys, template strings by
literal anchors with greedy or non-greedy gaps, and everything else by
strict equality (identity for objects). A value that does not fit gives
None.
"""

from .config import MatchConfig
from .patterns import (
    InstanceOf,
    Matcher,
    compile_pattern,
    from_format,
    greedy_template,
    match,
    matches,
    merge,
    placeholder,
    template,
)
from .types import (
    MISSING,
    AnonymousPlaceholder,
    Atom,
    ConfigurationError,
    LiteralPattern,
    MalformedPatternError,
    MatchDepthExceededError,
    NamedPlaceholder,
    Pattern,
    PredicateFaultError,
    RecordPattern,
    SequencePattern,
    ShapeMatchError,
    TemplateString,
    ValueKind,
    classify_value,
)
from .utils.logger import configure_default_logging, enable_debug_logging

__version__ = "0.1.0"

configure_default_logging()

__all__ = [
    "__version__",
    # Matching
    "match",
    "matches",
    "Matcher",
    "MatchConfig",
    "merge",
    # Construction
    "placeholder",
    "template",
    "greedy_template",
    "from_format",
    "compile_pattern",
    "InstanceOf",
    # Pattern nodes
    "Pattern",
    "AnonymousPlaceholder",
    "NamedPlaceholder",
    "SequencePattern",
    "RecordPattern",
    "TemplateString",
    "LiteralPattern",
    # Values
    "MISSING",
    "Atom",
    "ValueKind",
    "classify_value",
    # Errors
    "ShapeMatchError",
    "MalformedPatternError",
    "PredicateFaultError",
    "MatchDepthExceededError",
    "ConfigurationError",
    # Logging
    "enable_debug_logging",
]
