"""
Generic persistent zipper.

A `Location` is a cursor into an immutable tree: the node in focus plus a
`Frame` describing how to rebuild its ancestors. The zipper knows nothing about
the concrete node classes; it is driven by a `TreeOps` triple
(is_branch, children, make_node) carried by every location.

All functions are pure. A function that cannot satisfy its contract (moving
past an edge, entering a leaf, inserting a sibling at the root) returns None,
and every function returns None when given None, so chains of moves degrade to
None instead of failing halfway.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import dataclasses
import functools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


@dataclass(frozen=True)
class TreeOps:
    """Functions that let the zipper walk and rebuild a concrete tree type."""

    is_branch: Callable[[Any], bool]
    children: Callable[[Any], Sequence[Any]]
    make_node: Callable[[Any, Sequence[Any]], Any]


@dataclass(frozen=True)
class Frame:
    """
    One level of the reconstruction path.

    `siblings` is the parent's (possibly edited) child tuple and `index` the
    position of the focused node in it; `siblings[index]` is always the node in
    focus. `parent` is the parent node as it was when the cursor entered it;
    when `changed` is set it is rebuilt from `siblings` on the way up.
    """

    siblings: Tuple[Any, ...]
    index: int
    parent: Any
    parent_path: Optional["Frame"]
    changed: bool = False

    @property
    def lefts(self) -> Tuple[Any, ...]:
        return self.siblings[: self.index]

    @property
    def rights(self) -> Tuple[Any, ...]:
        return self.siblings[self.index + 1 :]


@dataclass(frozen=True)
class Location:
    """
    Zipper location.

    `node` is None for a virtual insertion point; `path` is None at the root.
    `context` is an opaque payload for higher layers; the zipper carries it
    unchanged from location to location.
    """

    node: Any
    path: Optional[Frame]
    tree: TreeOps = field(repr=False, compare=False)
    context: Any = field(default=None, repr=False, compare=False)

    @property
    def is_virtual(self) -> bool:
        return self.node is None


def absent_safe(fn: F) -> F:
    """Make `fn(loc, ...)` return None when `loc` is None."""

    @functools.wraps(fn)
    def wrapper(loc, *args, **kwargs):
        if loc is None:
            return None
        return fn(loc, *args, **kwargs)

    return wrapper  # type: ignore[return-value]


def zipper(root: Any, tree: TreeOps, context: Any = None) -> Location:
    """Create a location focused on `root`."""
    return Location(root, None, tree, context)


def _move(loc: Location, node: Any, path: Optional[Frame]) -> Location:
    return Location(node, path, loc.tree, loc.context)


def _set_current(frame: Frame, node: Any) -> Frame:
    i = frame.index
    siblings = frame.siblings[:i] + (node,) + frame.siblings[i + 1 :]
    return dataclasses.replace(frame, siblings=siblings, changed=True)


# Context


@absent_safe
def node(loc: Location) -> Any:
    return loc.node


@absent_safe
def path(loc: Location) -> Optional[Frame]:
    return loc.path


def is_branch(loc: Optional[Location]) -> bool:
    """Return True if the focused node can have children."""
    if loc is None or loc.node is None:
        return False
    return bool(loc.tree.is_branch(loc.node))


@absent_safe
def children(loc: Location) -> Optional[Tuple[Any, ...]]:
    """Children of the focused node, or None for leaves."""
    if not is_branch(loc):
        return None
    return tuple(loc.tree.children(loc.node))


@absent_safe
def lefts(loc: Location) -> Tuple[Any, ...]:
    return loc.path.lefts if loc.path is not None else ()


@absent_safe
def rights(loc: Location) -> Tuple[Any, ...]:
    return loc.path.rights if loc.path is not None else ()


# Navigation


@absent_safe
def down(loc: Location) -> Optional[Location]:
    """Move to the first child; None for leaves and empty branches."""
    kids = children(loc)
    if not kids:
        return None
    return _move(loc, kids[0], Frame(kids, 0, loc.node, loc.path))


@absent_safe
def up(loc: Location) -> Optional[Location]:
    """Move to the parent, rebuilding it if anything below was edited."""
    frame = loc.path
    if frame is None:
        return None
    if not frame.changed:
        return _move(loc, frame.parent, frame.parent_path)
    parent = loc.tree.make_node(frame.parent, frame.siblings)
    grand = frame.parent_path
    if grand is not None:
        grand = _set_current(grand, parent)
    return _move(loc, parent, grand)


@absent_safe
def root(loc: Location) -> Any:
    """Zip all the way up and return the root node."""
    while loc.path is not None:
        loc = up(loc)
    return loc.node


@absent_safe
def right(loc: Location) -> Optional[Location]:
    frame = loc.path
    if frame is None or frame.index + 1 >= len(frame.siblings):
        return None
    i = frame.index + 1
    return _move(loc, frame.siblings[i], dataclasses.replace(frame, index=i))


@absent_safe
def left(loc: Location) -> Optional[Location]:
    frame = loc.path
    if frame is None or frame.index == 0:
        return None
    i = frame.index - 1
    return _move(loc, frame.siblings[i], dataclasses.replace(frame, index=i))


@absent_safe
def leftmost(loc: Location) -> Optional[Location]:
    frame = loc.path
    if frame is None:
        return None
    if frame.index == 0:
        return loc
    return _move(loc, frame.siblings[0], dataclasses.replace(frame, index=0))


@absent_safe
def rightmost(loc: Location) -> Optional[Location]:
    frame = loc.path
    if frame is None:
        return None
    last = len(frame.siblings) - 1
    if frame.index == last:
        return loc
    return _move(loc, frame.siblings[last], dataclasses.replace(frame, index=last))


@absent_safe
def next(loc: Location) -> Optional[Location]:  # noqa: A001
    """
    Move to the next location in depth-first order.

    Returns None after the last node of the tree.
    """
    child = down(loc)
    if child is not None:
        return child
    cur = loc
    while cur is not None:
        sibling = right(cur)
        if sibling is not None:
            return sibling
        cur = up(cur)
    return None


@absent_safe
def prev(loc: Location) -> Optional[Location]:
    """Move to the previous location in depth-first order; None at the root."""
    cur = left(loc)
    if cur is None:
        return up(loc)
    while True:
        child = down(cur)
        if child is None:
            return cur
        cur = rightmost(child)


# Editing


@absent_safe
def replace(loc: Location, new_node: Any) -> Location:
    """Replace the focused node; also fills a virtual location."""
    if loc.path is None:
        return _move(loc, new_node, None)
    return _move(loc, new_node, _set_current(loc.path, new_node))


@absent_safe
def edit_node(loc: Location, fn: Callable[..., Any], *args: Any) -> Location:
    """Replace the focused node with `fn(node, *args)`."""
    return replace(loc, fn(loc.node, *args))


@absent_safe
def insert_left(loc: Location, item: Any) -> Optional[Location]:
    """Insert `item` as the left sibling of the focused node, without moving."""
    frame = loc.path
    if frame is None:
        logger.debug("insert_left at root location ignored")
        return None
    i = frame.index
    siblings = frame.siblings[:i] + (item,) + frame.siblings[i:]
    new_frame = dataclasses.replace(frame, siblings=siblings, index=i + 1, changed=True)
    return _move(loc, loc.node, new_frame)


@absent_safe
def insert_right(loc: Location, item: Any) -> Optional[Location]:
    """Insert `item` as the right sibling of the focused node, without moving."""
    frame = loc.path
    if frame is None:
        logger.debug("insert_right at root location ignored")
        return None
    i = frame.index + 1
    siblings = frame.siblings[:i] + (item,) + frame.siblings[i:]
    new_frame = dataclasses.replace(frame, siblings=siblings, changed=True)
    return _move(loc, loc.node, new_frame)


@absent_safe
def insert_child(loc: Location, item: Any) -> Optional[Location]:
    """Insert `item` as the first child of the focused node, without moving."""
    kids = children(loc)
    if kids is None:
        return None
    return replace(loc, loc.tree.make_node(loc.node, (item,) + kids))


@absent_safe
def append_child(loc: Location, item: Any) -> Optional[Location]:
    """Insert `item` as the last child of the focused node, without moving."""
    kids = children(loc)
    if kids is None:
        return None
    return replace(loc, loc.tree.make_node(loc.node, kids + (item,)))


@absent_safe
def remove(loc: Location) -> Optional[Location]:
    """
    Remove the focused node.

    The cursor moves to the previous sibling if there is one, otherwise to the
    parent (rebuilt without the removed child). Removing the root yields None.
    """
    frame = loc.path
    if frame is None:
        logger.debug("remove at root location ignored")
        return None
    i = frame.index
    siblings = frame.siblings[:i] + frame.siblings[i + 1 :]
    if i > 0:
        new_frame = dataclasses.replace(
            frame, siblings=siblings, index=i - 1, changed=True
        )
        return _move(loc, siblings[i - 1], new_frame)
    parent = loc.tree.make_node(frame.parent, siblings)
    grand = frame.parent_path
    if grand is not None:
        grand = _set_current(grand, parent)
    return _move(loc, parent, grand)
