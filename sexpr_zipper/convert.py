"""
Conversion between tree nodes and host (Python) values.

The zipper core never imports this module. A `Converter` is a pair of pure
functions injected into a cursor (see `navigation.edn`) or passed explicitly to
the edit functions. `LITERAL_CONVERTER` maps S-expression trees to plain Python
literals:

    tuple      <-> list node      (a b c)
    list       <-> vector node    [a b c]
    frozenset  <-> set node       #{a b c}   (set is accepted on the way in)
    dict       <-> map node       {k v}
    None, bool, int, float, Fraction, str, Symbol, Keyword <-> token

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Callable, List, Tuple

from .errors import ConversionError
from .nodes import FORMATTING_KINDS, Branch, Node, NodeKind, Token, Whitespace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Symbol:
    """Bare symbol such as `defn` or `my.ns/f`."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Keyword:
    """Keyword such as `:key`; `name` excludes the leading colon."""

    name: str

    def __str__(self) -> str:
        return f":{self.name}"


@dataclass(frozen=True)
class Converter:
    """Bidirectional node <-> host value strategy."""

    to_node: Callable[[Any], Node]
    to_value: Callable[[Node], Any]


_SCALAR_TYPES = (bool, int, float, Fraction, str, Symbol, Keyword)


def _member_key(value: Any) -> Tuple[str, Any]:
    # Order independent of hashing: type name, then repr.
    if isinstance(value, (set, frozenset)):
        return (type(value).__name__, tuple(sorted(map(_member_key, value))))
    return (type(value).__name__, repr(value))


def _spaced(items: List[Node], separator: str) -> List[Node]:
    out: List[Node] = []
    for i, item in enumerate(items):
        if i:
            out.append(Whitespace(separator))
        out.append(item)
    return out


def literal_to_node(value: Any, separator: str = " ") -> Node:
    """
    Convert a Python literal to a tree node.

    Nodes are returned unchanged. Children of composite values are separated
    by single whitespace nodes holding `separator`.

    Raises:
        ConversionError: If the value has no tree representation
    """
    if isinstance(value, Node):
        return value
    if value is None or isinstance(value, _SCALAR_TYPES):
        return Token(value)

    if isinstance(value, tuple):
        kind, items = NodeKind.LIST, list(value)
    elif isinstance(value, list):
        kind, items = NodeKind.VECTOR, value
    elif isinstance(value, (set, frozenset)):
        kind, items = NodeKind.SET, sorted(value, key=_member_key)
    elif isinstance(value, dict):
        kind, items = NodeKind.MAP, [x for pair in value.items() for x in pair]
    else:
        raise ConversionError(
            f"No tree representation for value of type {type(value).__name__}",
            value=value,
        )
    children = [literal_to_node(item, separator) for item in items]
    return Branch(kind, _spaced(children, separator))


def literal_to_value(node: Any) -> Any:
    """
    Convert a tree node to a Python literal, ignoring whitespace and comments.

    A virtual (None) node converts to None.

    Raises:
        ConversionError: If the node has no host value
    """
    if node is None:
        return None
    if isinstance(node, Token):
        return node.value
    if not isinstance(node, Branch):
        raise ConversionError(
            f"No host value for {getattr(node, 'kind', type(node).__name__)} node",
            value=node,
        )

    items = [
        literal_to_value(child)
        for child in node.children
        if child.kind not in FORMATTING_KINDS
    ]
    if node.kind == NodeKind.LIST:
        return tuple(items)
    if node.kind == NodeKind.VECTOR:
        return items
    if node.kind == NodeKind.SET:
        try:
            members = frozenset(items)
        except TypeError as e:
            raise ConversionError(
                f"Set contains an unhashable element: {e}", value=node
            ) from e
        if len(members) != len(items):
            raise ConversionError(
                f"Set has {len(items)} forms but only {len(members)} distinct values",
                value=node,
            )
        return members
    # NodeKind.MAP
    if len(items) % 2:
        raise ConversionError(
            f"Map literal needs an even number of forms, got {len(items)}",
            value=node,
        )
    try:
        mapping = dict(zip(items[::2], items[1::2]))
    except TypeError as e:
        raise ConversionError(f"Map has an unhashable key: {e}", value=node) from e
    if 2 * len(mapping) != len(items):
        raise ConversionError(
            f"Map has {len(items) // 2} keys but only {len(mapping)} distinct values",
            value=node,
        )
    return mapping


def literal_converter(separator: str = " ") -> Converter:
    """Build a literal converter whose composites use `separator`."""
    return Converter(
        to_node=lambda value: literal_to_node(value, separator),
        to_value=literal_to_value,
    )


LITERAL_CONVERTER = literal_converter()
