"""
Format-preserving S-expression tree model.

Every node carries a kind tag. Composite nodes (`Branch`) own an ordered tuple
of children, which keeps whitespace and comments interleaved with semantic
nodes in source order. Tokens carry a single literal value; whitespace and
comments carry their raw text.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Sequence, Tuple

from .errors import TreeStructureError


class NodeKind(str, Enum):
    """Closed set of node kinds."""

    LIST = "list"
    VECTOR = "vector"
    SET = "set"
    MAP = "map"
    TOKEN = "token"
    WHITESPACE = "whitespace"
    COMMENT = "comment"


BRANCH_KINDS = frozenset(
    {NodeKind.LIST, NodeKind.VECTOR, NodeKind.SET, NodeKind.MAP}
)
FORMATTING_KINDS = frozenset({NodeKind.WHITESPACE, NodeKind.COMMENT})


def same_literal(a: Any, b: Any) -> bool:
    """
    Compare two literal values by type and value.

    Plain `==` treats `True`, `1` and `1.0` as equal; as literals they are
    different forms.
    """
    return type(a) is type(b) and a == b


class Node:
    """Base class of all tree nodes."""

    kind: NodeKind


@dataclass(frozen=True, eq=False)
class Token(Node):
    """Atomic node holding one literal value."""

    value: Any
    kind: ClassVar[NodeKind] = NodeKind.TOKEN

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return same_literal(self.value, other.value)

    def __hash__(self) -> int:
        return hash((type(self.value), self.value))


@dataclass(frozen=True)
class Whitespace(Node):
    """Formatting node holding raw whitespace text."""

    text: str = " "
    kind: ClassVar[NodeKind] = NodeKind.WHITESPACE


@dataclass(frozen=True)
class Comment(Node):
    """Formatting node holding raw comment text (including the leading `;`)."""

    text: str
    kind: ClassVar[NodeKind] = NodeKind.COMMENT


@dataclass(frozen=True)
class Branch(Node):
    """
    Composite node: list, vector, set or map.

    This is the only branching node class; zipper code recognises branches
    with `isinstance(node, Branch)`.
    """

    kind: NodeKind
    children: Tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        if self.kind not in BRANCH_KINDS:
            raise TreeStructureError(
                f"Not a composite kind: {self.kind!r}",
                operation="make_node",
                details={"allowed": sorted(k.value for k in BRANCH_KINDS)},
            )
        children = self.children
        if not isinstance(children, (tuple, list)):
            raise TreeStructureError(
                f"Children of a {self.kind.value} node must be an ordered "
                f"sequence, got {type(children).__name__}",
                operation="make_node",
            )
        for child in children:
            if not isinstance(child, Node):
                raise TreeStructureError(
                    f"Child of a {self.kind.value} node is not a node: {child!r}",
                    operation="make_node",
                )
        object.__setattr__(self, "children", tuple(children))


SPACE = Whitespace(" ")


def is_branch(node: Any) -> bool:
    """Return True for composite nodes."""
    return isinstance(node, Branch)


def node_children(node: Branch) -> Tuple[Node, ...]:
    return node.children


def make_branch(node: Branch, children: Sequence[Node]) -> Branch:
    """Rebuild composite `node` with new `children`, keeping its kind."""
    if not isinstance(node, Branch):
        raise TreeStructureError(
            f"Cannot rebuild atomic node {node!r} with children",
            operation="make_node",
        )
    return Branch(node.kind, children)


def token(value: Any) -> Token:
    return Token(value)


def whitespace(text: str = " ") -> Whitespace:
    return Whitespace(text)


def comment(text: str) -> Comment:
    return Comment(text)


def list_node(*children: Node) -> Branch:
    return Branch(NodeKind.LIST, children)


def vector_node(*children: Node) -> Branch:
    return Branch(NodeKind.VECTOR, children)


def set_node(*children: Node) -> Branch:
    return Branch(NodeKind.SET, children)


def map_node(*children: Node) -> Branch:
    return Branch(NodeKind.MAP, children)
