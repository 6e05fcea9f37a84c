"""
Tests for value-level replace and edit.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import pytest

from sexpr_zipper import editing as e
from sexpr_zipper import navigation as nav
from sexpr_zipper.convert import Converter, Keyword
from sexpr_zipper.errors import ConversionError
from sexpr_zipper.nodes import Token


def test_replace_with_host_value(read, render) -> None:
    loc = nav.down(nav.edn(read("(a b)")))
    loc = e.replace(loc, 42)
    assert nav.value(loc) == 42
    assert render(nav.root(loc)) == "(42 b)"


def test_replace_with_composite_value(read, render) -> None:
    loc = nav.right(nav.down(nav.edn(read("(def config nil)"))))
    loc = nav.right(loc)
    loc = e.replace(loc, {Keyword("port"): [80, 443]})
    assert render(nav.root(loc)) == "(def config {:port [80 443]})"


def test_edit_applies_function_with_arguments(read, render) -> None:
    loc = nav.right(nav.down(nav.edn(read("[1 2]"))))
    loc = e.edit(loc, lambda v, k: v + k, 10)
    assert render(nav.root(loc)) == "[1 12]"


def test_edit_composite(read, render) -> None:
    loc = nav.right(nav.down(nav.edn(read("(assoc [1 2])"))))
    loc = e.edit(loc, lambda v: v + [3])
    assert render(nav.root(loc)) == "(assoc [1 2 3])"


def test_identity_edit_preserves_host_value(read) -> None:
    tree = read("(ns demo ;; header\n  {:a [1 2]\n   :b #{3}})")
    before = nav.sexpr(nav.edn(tree))
    loc = nav.rightmost(nav.down(nav.edn(tree)))
    loc = e.edit(loc, lambda v: v)
    assert nav.sexpr(nav.edn(nav.root(loc))) == before


def test_edit_leaves_other_subtrees_untouched(read) -> None:
    tree = read("([1] [2] [3])")
    loc = nav.right(nav.down(nav.edn(tree)))
    new_root = nav.root(e.edit(loc, lambda v: v * 2))
    assert new_root.children[0] is tree.children[0]
    assert new_root.children[4] is tree.children[4]
    assert new_root.children[2] != tree.children[2]


def test_conversion_errors_are_raised_not_absent(read) -> None:
    loc = nav.down(nav.edn(read("({:a} x)")))
    with pytest.raises(ConversionError):
        e.edit(loc, lambda v: v)
    with pytest.raises(ConversionError) as exc_info:
        e.replace(nav.right(loc), object())
    assert exc_info.value.code == "CONVERSION_ERROR"


def test_cursor_converter_is_used(read, render) -> None:
    upper = Converter(
        to_node=lambda v: Token(str(v).upper()),
        to_value=lambda n: str(n.value),
    )
    loc = nav.down(nav.edn(read('("a" "b")'), converter=upper))
    loc = e.edit(loc, lambda v: v + "x")
    assert render(nav.root(loc)) == '("AX" "b")'


def test_explicit_converter_wins(read) -> None:
    doubled = Converter(to_node=lambda v: Token(v * 2), to_value=lambda n: n.value)
    loc = nav.down(nav.edn(read("(1)")))
    assert nav.value(e.replace(loc, 4, converter=doubled)) == 8
    assert nav.value(e.replace(loc, 4)) == 4


def test_absent_location_propagates() -> None:
    assert e.replace(None, 1) is None
    assert e.edit(None, lambda v: v) is None


def test_identity_edit_never_merges_members(read) -> None:
    loc = nav.edn(read("#{1 true 1.0}"))
    with pytest.raises(ConversionError):
        e.edit(loc, lambda v: v)
    loc = nav.edn(read("{:a 1 :a 2}"))
    with pytest.raises(ConversionError):
        e.edit(loc, lambda v: v)
