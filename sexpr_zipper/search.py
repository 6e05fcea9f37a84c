"""
Search over zipper locations.

Every search tests the starting location first and then applies a movement
function (whitespace-aware `right` unless told otherwise) until a location
satisfies the predicate or the movement fails.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from . import navigation as nav
from .nodes import NodeKind, same_literal
from .skipping import LocationPredicate, Move, skip
from .zipper import Location


def find(
    loc: Optional[Location], pred: LocationPredicate, move: Move = nav.right
) -> Optional[Location]:
    """
    Find the first location satisfying `pred`, starting at `loc` itself.

    Args:
        loc: Starting location (tested before any move)
        pred: Location predicate
        move: Movement function, defaults to whitespace-aware right

    Returns:
        Matching location or None
    """
    return skip(move, lambda candidate: not pred(candidate), loc)


def find_by_tag(
    loc: Optional[Location], tag: NodeKind, move: Move = nav.right
) -> Optional[Location]:
    """Find the first location with the given tag."""
    return find(loc, lambda candidate: nav.tag(candidate) == tag, move)


def find_next_by_tag(loc: Optional[Location], tag: NodeKind) -> Optional[Location]:
    """Find the next location with the given tag, moving right before searching."""
    start = nav.right(loc)
    if start is None:
        return None
    return find_by_tag(start, tag, nav.right)


def find_previous_by_tag(
    loc: Optional[Location], tag: NodeKind
) -> Optional[Location]:
    """Find the previous location with the given tag, moving left before searching."""
    start = nav.left(loc)
    if start is None:
        return None
    return find_by_tag(start, tag, nav.left)


def find_token(
    loc: Optional[Location], pred: Callable[[Any], bool], move: Move = nav.right
) -> Optional[Location]:
    """Find the first token whose literal value satisfies `pred`."""
    return find(
        loc,
        lambda candidate: nav.tag(candidate) == NodeKind.TOKEN
        and pred(nav.value(candidate)),
        move,
    )


def find_value(
    loc: Optional[Location], value: Any, move: Move = nav.right
) -> Optional[Location]:
    """Find the first token holding `value` (same type and equal value)."""
    return find_token(loc, lambda v: same_literal(v, value), move)
