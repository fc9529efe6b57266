"""Template string decomposition.

A TemplateString ``literals=[L0, ..., Ln]`` splits a string into ``n`` gaps:
the string must start with L0, end with Ln and contain L1..L(n-1) in order
between them. Literal fragments are compared as plain text.

Decomposition uses ``str.find``/``str.rfind`` instead of a compiled regex,
so it runs in linear time regardless of the literal content:

- non-greedy: every inner literal is placed at its leftmost feasible
  position, which makes each gap as short as possible
- greedy: literals are placed right to left at their rightmost feasible
  position, which makes each gap as long as possible

Both produce exactly the split a backtracking ``^L0(.*?)L1...Ln$`` (or
``(.*)``) regex would, with ``.`` matching newlines.
"""

from collections.abc import Callable, Sequence
from typing import Any

from shapematch.types.patterns import Pattern, TemplateString
from shapematch.utils.logger import logger

from .merger import Captures, merge_all


def _place_leftmost(text: str, inner: Sequence[str], start: int, end: int) -> list[int] | None:
    positions = []
    cursor = start
    for literal in inner:
        found = text.find(literal, cursor, end)
        if found == -1:
            return None
        positions.append(found)
        cursor = found + len(literal)
    return positions


def _place_rightmost(text: str, inner: Sequence[str], start: int, end: int) -> list[int] | None:
    positions = []
    cursor = end
    for literal in reversed(inner):
        found = text.rfind(literal, start, cursor)
        if found == -1:
            return None
        positions.append(found)
        cursor = found
    positions.reverse()
    return positions


def split_template(text: str, literals: Sequence[str], greedy: bool = False) -> list[str] | None:
    """Split ``text`` into the gaps between ``literals``.

    Args:
        text: String to decompose.
        literals: Anchoring fragments, one more than the number of gaps.
        greedy: Prefer the longest gaps instead of the shortest.

    Returns:
        The gap substrings in left-to-right order, or None when ``text``
        cannot be decomposed.
    """
    first, last = literals[0], literals[-1]
    if len(literals) == 1:
        return [] if text == first else None

    if not (text.startswith(first) and text.endswith(last)):
        return None
    start = len(first)
    end = len(text) - len(last)
    if end < start:
        # leading and trailing literals would overlap
        return None

    inner = literals[1:-1]
    if greedy:
        positions = _place_rightmost(text, inner, start, end)
    else:
        positions = _place_leftmost(text, inner, start, end)
    if positions is None:
        return None

    gaps = []
    cursor = start
    for literal, position in zip(inner, positions):
        gaps.append(text[cursor:position])
        cursor = position + len(literal)
    gaps.append(text[cursor:end])
    return gaps


def match_template(
    node: TemplateString,
    text: str,
    match_gap: Callable[[Pattern, Any], Captures | None],
) -> Captures | None:
    """Match a string against a TemplateString node.

    Every gap is handed to ``match_gap`` with its subpattern; the first
    failing gap fails the whole template. No subpattern is evaluated unless
    the literal skeleton fits.
    """
    gaps = split_template(text, node.literals, node.greedy)
    if gaps is None:
        logger.debug("Template literals do not fit {!r}", text[:80])
        return None

    partials = []
    for index, (subpattern, gap) in enumerate(zip(node.subpatterns, gaps)):
        partial = match_gap(subpattern, gap)
        if partial is None:
            logger.debug("Template gap {} ({!r}) rejected by its subpattern", index, gap[:80])
            return None
        partials.append(partial)
    return merge_all(partials)
