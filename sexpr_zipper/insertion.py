"""
Spacing-aware insertion.

Wrappers around the primitive zipper insertions that keep inserted items
separated from their neighbours by exactly one whitespace node. Existing
whitespace next to the insertion point is reused as a separator; a new
separator node is created only where a significant neighbour would otherwise
touch the inserted item.

Items may be nodes or host values; host values go through the cursor's
converter first.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from typing import Any, Optional

from . import zipper as z
from .navigation import context_of, is_whitespace
from .nodes import Node, Whitespace
from .zipper import Location, absent_safe


def _space(loc: Location) -> Whitespace:
    return Whitespace(context_of(loc).config.separator)


def _as_node(loc: Location, item: Any) -> Node:
    if isinstance(item, Node):
        return item
    return context_of(loc).converter.to_node(item)


@absent_safe
def insert_right(loc: Location, item: Any) -> Optional[Location]:
    """Insert item to the right of the current location, adding a space if needed."""
    item = _as_node(loc, item)
    if loc.node is None:
        return z.replace(loc, item)
    space = _space(loc)
    r = z.right(loc)
    if r is None or is_whitespace(r):
        return z.insert_right(z.insert_right(loc, item), space)
    loc = z.insert_right(loc, space)
    return z.insert_right(z.insert_right(loc, item), space)


@absent_safe
def insert_left(loc: Location, item: Any) -> Optional[Location]:
    """Insert item to the left of the current location, adding a space if needed."""
    item = _as_node(loc, item)
    if loc.node is None:
        return z.replace(loc, item)
    space = _space(loc)
    r = z.left(loc)
    if r is None or is_whitespace(r):
        return z.insert_left(z.insert_left(loc, item), space)
    loc = z.insert_left(loc, space)
    return z.insert_left(z.insert_left(loc, item), space)


@absent_safe
def insert_child(loc: Location, item: Any) -> Optional[Location]:
    """Insert item as the first child of the current location."""
    item = _as_node(loc, item)
    r = z.down(loc)
    if r is None or r.node is None or is_whitespace(r):
        return z.insert_child(loc, item)
    return z.insert_child(z.insert_child(loc, _space(loc)), item)


@absent_safe
def append_child(loc: Location, item: Any) -> Optional[Location]:
    """Append item as the last child of the current location."""
    item = _as_node(loc, item)
    r = z.rightmost(z.down(loc))
    if r is None or r.node is None or is_whitespace(r):
        return z.append_child(loc, item)
    return z.append_child(z.append_child(loc, _space(loc)), item)
