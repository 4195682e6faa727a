"""Tests for the tree printer."""

from __future__ import annotations

import pytest

from declparse.ast_nodes import ConstDecl, ExprList, RuntimeDecl
from declparse.printer import TreePrinter
from tests.helpers import COLON, I, bad, parse


def render(node) -> str:
    return TreePrinter().render(node)


class TestLeaves:
    def test_invalid(self):
        assert render(bad("x")) == "(inv)"
        assert render(bad(COLON.kind)) == "(inv)"

    def test_identifier(self):
        assert render(I("f32")) == "'f32'"


class TestLists:
    def test_list(self):
        assert render(ExprList([I("a"), I("b")])) == "(list\n  'a'\n  'b')"

    def test_empty_list(self):
        assert render(ExprList([])) == "(list)"

    def test_nested_list_indents_deeper(self):
        tree = ExprList([I("a"), ExprList([I("b"), I("c")])])
        assert render(tree) == "(list\n  'a'\n  (list\n    'b'\n    'c'))"

    def test_start_level(self):
        assert TreePrinter().render(ExprList([I("a")]), level=3) == "(list\n      'a')"


class TestDeclarations:
    def test_runtime_decl(self):
        decl = RuntimeDecl([I("x"), I("y"), I("z")], I("f32"), [])
        assert render(decl) == "(declRt names: 'x', 'y', 'z' type: 'f32')"

    def test_const_decl_omits_missing_type(self):
        decl = ConstDecl([I("x")], None, [I("v")])
        assert render(decl) == "(declCt names: 'x' values: 'v')"

    def test_all_fields_in_order(self):
        decl = ConstDecl([I("x")], I("T"), [I("a"), I("b")])
        assert render(decl) == "(declCt names: 'x' type: 'T' values: 'a', 'b')"

    def test_empty_fields_omitted(self):
        assert render(RuntimeDecl([], I("t"), [])) == "(declRt type: 't')"
        assert render(ConstDecl([], None, [])) == "(declCt)"

    def test_field_nodes_render_from_first_level(self):
        decl = RuntimeDecl([I("x")], ExprList([I("a"), I("b")]), [])
        expected = "(declRt names: 'x' type: (list\n  'a'\n  'b'))"
        assert render(decl) == expected
        assert render(ExprList([decl])) == f"(list\n  {expected})"


class TestParsedTrees:
    def test_grouped_declarations(self):
        (node,) = parse("( x , y , z : f32 , w : f64 )")
        assert render(node) == (
            "(list\n"
            "  (declRt names: 'x', 'y', 'z' type: 'f32')\n"
            "  (declRt names: 'w' type: 'f64'))"
        )

    def test_render_all(self):
        nodes = parse("x , y , z : f32 , w : f64")
        assert TreePrinter().render_all(nodes) == (
            "(declRt names: 'x', 'y', 'z' type: 'f32')\n"
            "(declRt names: 'w' type: 'f64')"
        )

    def test_render_all_empty(self):
        assert TreePrinter().render_all([]) == ""

    def test_invalid_in_tree(self):
        (node,) = parse("x : )")
        assert render(node) == "(declRt names: 'x' type: (inv))"

    def test_unknown_node(self):
        with pytest.raises(TypeError, match="cannot render"):
            render(object())  # type: ignore[arg-type]
