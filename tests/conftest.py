"""
Pytest fixtures for zipper tests.

Provides a small Lark reader that turns S-expression text into a
format-preserving node tree, and a printer that turns it back into text.
Both exist only for tests: the package itself never parses or prints.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from typing import Any, Callable, List

import pytest
from lark import Lark, Token as LarkToken, Transformer

from sexpr_zipper.convert import Keyword, Symbol
from sexpr_zipper.nodes import (
    Branch,
    Comment,
    Node,
    NodeKind,
    Token,
    Whitespace,
)


_GRAMMAR = r"""
start: _form

_form: list | vector | set | map | token

list: "(" _item* ")"
vector: "[" _item* "]"
set: "#{" _item* "}"
map: "{" _item* "}"
_item: _form | WS | COMMENT

token: FLOAT | INT | STRING | KEYWORD | SYMBOL

WS: /[ \t\r\n,]+/
COMMENT: /;[^\n]*/
FLOAT.3: /-?\d+\.\d+/
INT.2: /-?\d+/
KEYWORD: /:[^\s,;()\[\]{}"]+/
SYMBOL: /[a-zA-Z*+!\-_?<>=\/.&%$][^\s,;()\[\]{}"]*/

%import common.ESCAPED_STRING -> STRING
"""

_parser = Lark(_GRAMMAR, parser="lalr", start="start")

_LITERAL_SYMBOLS = {"nil": None, "true": True, "false": False}


class _ToNodes(Transformer):
    def WS(self, t: LarkToken) -> Whitespace:  # noqa: N802
        return Whitespace(str(t))

    def COMMENT(self, t: LarkToken) -> Comment:  # noqa: N802
        return Comment(str(t))

    def FLOAT(self, t: LarkToken) -> float:  # noqa: N802
        return float(str(t))

    def INT(self, t: LarkToken) -> int:  # noqa: N802
        return int(str(t))

    def STRING(self, t: LarkToken) -> str:  # noqa: N802
        return bytes(str(t)[1:-1], "utf-8").decode("unicode_escape")

    def KEYWORD(self, t: LarkToken) -> Keyword:  # noqa: N802
        return Keyword(str(t)[1:])

    def SYMBOL(self, t: LarkToken) -> Any:  # noqa: N802
        name = str(t)
        if name in _LITERAL_SYMBOLS:
            return _LITERAL_SYMBOLS[name]
        return Symbol(name)

    def token(self, items: List[Any]) -> Token:
        return Token(items[0])

    def list(self, items: List[Any]) -> Branch:
        return Branch(NodeKind.LIST, items)

    def vector(self, items: List[Any]) -> Branch:
        return Branch(NodeKind.VECTOR, items)

    def set(self, items: List[Any]) -> Branch:
        return Branch(NodeKind.SET, items)

    def map(self, items: List[Any]) -> Branch:
        return Branch(NodeKind.MAP, items)

    def start(self, items: List[Any]) -> Node:
        return items[0]


_DELIMITERS = {
    NodeKind.LIST: ("(", ")"),
    NodeKind.VECTOR: ("[", "]"),
    NodeKind.SET: ("#{", "}"),
    NodeKind.MAP: ("{", "}"),
}


def read_sexpr(text: str) -> Node:
    """Parse a single S-expression form, keeping whitespace and comments."""
    return _ToNodes().transform(_parser.parse(text))


def _render_value(value: Any) -> str:
    if value is None:
        return "nil"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, str):
        return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'
    return str(value)


def render_sexpr(node: Node) -> str:
    """Print a node tree back to text."""
    if isinstance(node, Branch):
        opening, closing = _DELIMITERS[node.kind]
        return opening + "".join(render_sexpr(c) for c in node.children) + closing
    if isinstance(node, (Whitespace, Comment)):
        return node.text
    return _render_value(node.value)


@pytest.fixture
def read() -> Callable[[str], Node]:
    """Reader turning S-expression text into a node tree."""
    return read_sexpr


@pytest.fixture
def render() -> Callable[[Node], str]:
    """Printer turning a node tree back into text."""
    return render_sexpr
