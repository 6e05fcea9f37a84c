"""
sexpr_zipper - whitespace-aware zipper for format-preserving S-expression trees.

The package root exposes the whitespace-aware surface: movements skip
whitespace and comments, insertions keep single-space separation. The raw
zipper primitives live in `sexpr_zipper.zipper`.

Public API:
  - edn(root, config=None, converter=None) -> Location
  - right/left/up/down/next/prev/leftmost/rightmost
  - insert_right/insert_left/insert_child/append_child/remove
  - replace/edit (through a converter)
  - find/find_by_tag/find_next_by_tag/find_previous_by_tag/find_token/find_value

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .config import DEFAULT_CONFIG, ZipperConfig, load_config, validate_config
from .convert import (
    LITERAL_CONVERTER,
    Converter,
    Keyword,
    Symbol,
    literal_converter,
)
from .editing import edit, replace
from .errors import (
    ConfigurationError,
    ConversionError,
    SexprZipperError,
    TreeStructureError,
)
from .search import (
    find,
    find_by_tag,
    find_next_by_tag,
    find_previous_by_tag,
    find_token,
    find_value,
)
from .insertion import append_child, insert_child, insert_left, insert_right
from .navigation import (
    EdnContext,
    down,
    edn,
    is_whitespace,
    left,
    leftmost,
    next,
    node,
    prev,
    remove,
    right,
    rightmost,
    root,
    sexpr,
    skip_whitespace,
    skip_whitespace_left,
    tag,
    up,
    value,
)
from .nodes import (
    SPACE,
    Branch,
    Comment,
    Node,
    NodeKind,
    Token,
    Whitespace,
    comment,
    list_node,
    map_node,
    set_node,
    token,
    vector_node,
    whitespace,
)
from .skipping import skip
from .zipper import Frame, Location, TreeOps

__all__ = [
    "DEFAULT_CONFIG",
    "ZipperConfig",
    "load_config",
    "validate_config",
    "LITERAL_CONVERTER",
    "Converter",
    "Keyword",
    "Symbol",
    "literal_converter",
    "edit",
    "replace",
    "ConfigurationError",
    "ConversionError",
    "SexprZipperError",
    "TreeStructureError",
    "find",
    "find_by_tag",
    "find_next_by_tag",
    "find_previous_by_tag",
    "find_token",
    "find_value",
    "append_child",
    "insert_child",
    "insert_left",
    "insert_right",
    "EdnContext",
    "down",
    "edn",
    "is_whitespace",
    "left",
    "leftmost",
    "next",
    "node",
    "prev",
    "remove",
    "right",
    "rightmost",
    "root",
    "sexpr",
    "skip_whitespace",
    "skip_whitespace_left",
    "tag",
    "up",
    "value",
    "SPACE",
    "Branch",
    "Comment",
    "Node",
    "NodeKind",
    "Token",
    "Whitespace",
    "comment",
    "list_node",
    "map_node",
    "set_node",
    "token",
    "vector_node",
    "whitespace",
    "skip",
    "Frame",
    "Location",
    "TreeOps",
]
