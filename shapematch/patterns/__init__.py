"""Pattern construction and matching.

Components:
- builders: placeholder(), template(), from_format(), compile_pattern()
- merger: last-write-wins capture merging
- decomposer: linear-time template string decomposition
- matcher: match(), matches() and the reusable Matcher

Usage:
    from shapematch.patterns import match, placeholder, template

    pattern = ["point", {"x": placeholder("x"), "y": placeholder("y")}]
    match(pattern, ["point", {"x": 1, "y": 2, "z": 3}])   # {"x": 1, "y": 2}

    greeting = template("Hello, ", placeholder("name"), "!")
    match(greeting, "Hello, world!")                      # {"name": "world"}
"""

from .builders import (
    InstanceOf,
    compile_pattern,
    from_format,
    greedy_template,
    placeholder,
    template,
)
from .merger import Captures, merge, merge_all
from .decomposer import match_template, split_template
from .matcher import Matcher, match, matches

__all__ = [
    "InstanceOf",
    "compile_pattern",
    "from_format",
    "greedy_template",
    "placeholder",
    "template",
    "Captures",
    "merge",
    "merge_all",
    "match_template",
    "split_template",
    "Matcher",
    "match",
    "matches",
]
