"""Capture merging.

Sibling capture maps are folded left to right in traversal order. On a key
collision the later map wins, so duplicate placeholder names resolve to the
last occurrence.
"""

from collections.abc import Iterable, Mapping
from typing import Any

Captures = dict[Any, Any]


def merge(left: Mapping[Any, Any], right: Mapping[Any, Any]) -> Captures:
    """Return a new map of ``left`` overlaid with every entry of ``right``."""
    merged = dict(left)
    merged.update(right)
    return merged


def merge_all(partials: Iterable[Mapping[Any, Any]]) -> Captures:
    """Fold capture maps in order; an empty iterable gives ``{}``."""
    merged: Captures = {}
    for partial in partials:
        merged.update(partial)
    return merged
