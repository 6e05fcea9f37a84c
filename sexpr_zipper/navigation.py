"""
Whitespace-aware navigation over S-expression trees.

Every movement here is the primitive zipper movement followed by a skip over
insignificant locations (whitespace and, by default, comments), so callers
only ever land on significant nodes.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from . import nodes
from . import zipper as z
from .config import DEFAULT_CONFIG, ZipperConfig
from .convert import LITERAL_CONVERTER, Converter, literal_converter
from .nodes import NodeKind, Token
from .skipping import Move, skip
from .zipper import Location, TreeOps, absent_safe

EDN_TREE = TreeOps(
    is_branch=nodes.is_branch,
    children=nodes.node_children,
    make_node=nodes.make_branch,
)


@dataclass(frozen=True)
class EdnContext:
    """Policy bound to a cursor when it is created."""

    config: ZipperConfig = DEFAULT_CONFIG
    converter: Converter = LITERAL_CONVERTER


DEFAULT_CONTEXT = EdnContext()


def edn(
    root: Any,
    config: Optional[ZipperConfig] = None,
    converter: Optional[Converter] = None,
) -> Location:
    """
    Create a cursor over an S-expression tree.

    Args:
        root: Root node (usually supplied by a parser); None gives a virtual
            location that the first insertion fills
        config: Whitespace policy, defaults to DEFAULT_CONFIG
        converter: Node <-> host value strategy, defaults to the literal
            converter using the configured separator
    """
    config = config or DEFAULT_CONFIG
    if converter is None:
        converter = literal_converter(config.separator)
    return z.zipper(root, EDN_TREE, EdnContext(config=config, converter=converter))


def context_of(loc: Location) -> EdnContext:
    ctx = loc.context
    return ctx if isinstance(ctx, EdnContext) else DEFAULT_CONTEXT


# Access


@absent_safe
def tag(loc: Location) -> Optional[NodeKind]:
    """Kind of the focused node; None at a virtual location."""
    return getattr(loc.node, "kind", None)


@absent_safe
def value(loc: Location) -> Any:
    """Literal value of a token, raw text of whitespace or comment."""
    node = loc.node
    if isinstance(node, Token):
        return node.value
    if isinstance(node, (nodes.Whitespace, nodes.Comment)):
        return node.text
    return None


@absent_safe
def sexpr(loc: Location, converter: Optional[Converter] = None) -> Any:
    """
    Host value of the focused subtree.

    Raises:
        ConversionError: If the converter cannot represent the node
    """
    conv = converter or context_of(loc).converter
    return conv.to_value(loc.node)


def is_whitespace(loc: Optional[Location]) -> bool:
    """True if the focused node is insignificant (whitespace or comment)."""
    if loc is None:
        return False
    return tag(loc) in context_of(loc).config.insignificant_kinds


# Skip


def skip_whitespace(loc: Optional[Location], move: Move = z.right) -> Optional[Location]:
    """Apply `move` (default: primitive right) until a significant node is reached."""
    return skip(move, is_whitespace, loc)


def skip_whitespace_left(loc: Optional[Location]) -> Optional[Location]:
    return skip_whitespace(loc, z.left)


# Move


def right(loc: Optional[Location]) -> Optional[Location]:
    """Move right to the next significant sibling."""
    return skip_whitespace(z.right(loc))


def left(loc: Optional[Location]) -> Optional[Location]:
    """Move left to the previous significant sibling."""
    return skip_whitespace_left(z.left(loc))


def down(loc: Optional[Location]) -> Optional[Location]:
    """Move to the first significant child."""
    return skip_whitespace(z.down(loc))


def up(loc: Optional[Location]) -> Optional[Location]:
    """Move to the parent."""
    # Parents are composite, so the skip only matters for hand-built trees.
    return skip_whitespace_left(z.up(loc))


def next(loc: Optional[Location]) -> Optional[Location]:  # noqa: A001
    """Move to the next significant location in depth-first order."""
    return skip_whitespace(z.next(loc), z.next)


def prev(loc: Optional[Location]) -> Optional[Location]:
    """Move to the previous significant location in depth-first order."""
    return skip_whitespace(z.prev(loc), z.prev)


def leftmost(loc: Optional[Location]) -> Optional[Location]:
    """Move to the first significant sibling."""
    return skip_whitespace(z.leftmost(loc))


def rightmost(loc: Optional[Location]) -> Optional[Location]:
    """Move to the last significant sibling."""
    return skip_whitespace_left(z.rightmost(loc))


node = z.node
root = z.root
remove = z.remove
