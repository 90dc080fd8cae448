"""Tests for JavaScriptFrontend: tree-sitter CST to syntax-tree lowering."""

from __future__ import annotations

from tree_sitter_language_pack import get_parser

from jssim.ast_nodes import (
    AssignmentExpression,
    CallExpression,
    DeclarationKind,
    ExpressionStatement,
    FunctionDeclaration,
    Identifier,
    MemberExpression,
    NumericLiteral,
    ObjectExpression,
    Program,
    StringLiteral,
    UnsupportedExpression,
    UnsupportedStatement,
    VariableDeclaration,
)
from jssim.frontend import JavaScriptFrontend


def _lower_js(source: str) -> Program:
    parser = get_parser("javascript")
    tree = parser.parse(source.encode("utf-8"))
    frontend = JavaScriptFrontend()
    return frontend.lower(tree, source.encode("utf-8"))


def _first_expr(source: str):
    stmt = _lower_js(source).body[0]
    assert isinstance(stmt, ExpressionStatement)
    return stmt.expression


class TestJavaScriptSmoke:
    def test_empty_program(self):
        program = _lower_js("")
        assert program.body == []

    def test_comments_are_skipped(self):
        program = _lower_js("// note\n/* block */\nvar a;")
        assert len(program.body) == 1

    def test_empty_statements_are_skipped(self):
        program = _lower_js(";;var a;;")
        assert len(program.body) == 1


class TestDeclarations:
    def test_var_declaration(self):
        stmt = _lower_js("var x = 10;").body[0]
        assert isinstance(stmt, VariableDeclaration)
        assert stmt.declaration_kind == DeclarationKind.VAR
        assert stmt.declarators[0].name == "x"
        assert stmt.declarators[0].init == NumericLiteral(
            value=10, source_location=stmt.declarators[0].init.source_location
        )

    def test_let_and_const_kinds(self):
        body = _lower_js("let a; const b = 1;").body
        assert body[0].declaration_kind == DeclarationKind.LET
        assert body[0].declarators[0].init is None
        assert body[1].declaration_kind == DeclarationKind.CONST

    def test_multiple_declarators(self):
        stmt = _lower_js("var a = 1, b, c = 'z';").body[0]
        assert [d.name for d in stmt.declarators] == ["a", "b", "c"]
        assert stmt.declarators[1].init is None

    def test_destructuring_declarator_skipped(self):
        stmt = _lower_js("var { a } = obj, b = 2;").body[0]
        assert [d.name for d in stmt.declarators] == ["b"]

    def test_function_declaration(self):
        stmt = _lower_js("function add(a, b) { var c = 1; add(); }").body[0]
        assert isinstance(stmt, FunctionDeclaration)
        assert stmt.name == "add"
        assert stmt.params == ["a", "b"]
        assert isinstance(stmt.body[0], VariableDeclaration)
        assert isinstance(stmt.body[1], ExpressionStatement)


class TestExpressions:
    def test_string_literal_drops_quotes(self):
        init = _lower_js("var s = 'hello';").body[0].declarators[0].init
        assert isinstance(init, StringLiteral)
        assert init.value == "hello"

    def test_string_escape_sequences(self):
        init = _lower_js(r'var s = "a\n\u0041";').body[0].declarators[0].init
        assert init.value == "a\nA"

    def test_empty_string(self):
        init = _lower_js('var s = "";').body[0].declarators[0].init
        assert init.value == ""

    def test_float_and_hex_numbers(self):
        body = _lower_js("var f = 2.5; var h = 0x10;").body
        assert body[0].declarators[0].init.value == 2.5
        assert body[1].declarators[0].init.value == 16

    def test_legacy_octal_numbers(self):
        body = _lower_js("var o = 010; var d = 019; var z = 0;").body
        assert body[0].declarators[0].init.value == 8
        assert body[1].declarators[0].init.value == 19
        assert body[2].declarators[0].init.value == 0
        assert isinstance(body[0].declarators[0].init.value, int)

    def test_object_literal_with_identifier_keys(self):
        init = _lower_js("var o = { a: 1, b: 'x', c };").body[0].declarators[0].init
        assert isinstance(init, ObjectExpression)
        assert [p.key for p in init.properties] == ["a", "b", "c"]
        assert isinstance(init.properties[2].value, Identifier)

    def test_object_literal_skips_non_identifier_keys(self):
        source = "var o = { 'q': 1, [k]: 2, ok: 3 };"
        init = _lower_js(source).body[0].declarators[0].init
        assert [p.key for p in init.properties] == ["ok"]

    def test_member_expression(self):
        init = _lower_js("var v = a.b.c;").body[0].declarators[0].init
        assert isinstance(init, MemberExpression)
        assert init.property == "c"
        assert isinstance(init.object, MemberExpression)
        assert str(init) == "a.b.c"

    def test_computed_member_is_unsupported(self):
        init = _lower_js("var v = a[0];").body[0].declarators[0].init
        assert isinstance(init, UnsupportedExpression)
        assert init.node_type == "subscript_expression"

    def test_parentheses_are_unwrapped(self):
        init = _lower_js("var v = (x);").body[0].declarators[0].init
        assert isinstance(init, Identifier)

    def test_log_call(self):
        expr = _first_expr("console.log(x, 2);")
        assert isinstance(expr, CallExpression)
        assert isinstance(expr.callee, MemberExpression)
        assert len(expr.arguments) == 2

    def test_identifier_call(self):
        expr = _first_expr("f();")
        assert isinstance(expr, CallExpression)
        assert expr.callee == Identifier(
            name="f", source_location=expr.callee.source_location
        )
        assert expr.arguments == []

    def test_assignment_targets(self):
        assert isinstance(_first_expr("x = 1;").target, Identifier)
        assert isinstance(_first_expr("o.p = 1;").target, MemberExpression)

    def test_binary_expression_is_unsupported(self):
        init = _lower_js("var v = 1 + 2;").body[0].declarators[0].init
        assert init.node_type == "binary_expression"

    def test_undefined_keyword_is_unsupported(self):
        init = _lower_js("var v = undefined;").body[0].declarators[0].init
        assert isinstance(init, UnsupportedExpression)

    def test_augmented_assignment_is_unsupported(self):
        assert isinstance(_first_expr("x += 1;"), UnsupportedExpression)


class TestUnsupportedStatements:
    def test_control_flow_lowered_as_inert(self):
        body = _lower_js("if (a) { b(); } while (c) {} return;").body
        assert [type(s) for s in body[:2]] == [UnsupportedStatement] * 2
        assert body[0].node_type == "if_statement"
        assert body[1].node_type == "while_statement"

    def test_class_declaration_is_unsupported(self):
        stmt = _lower_js("class A {}").body[0]
        assert isinstance(stmt, UnsupportedStatement)


class TestSourceLocations:
    def test_statement_locations(self):
        body = _lower_js("var a = 1;\nvar b = 2;").body
        assert body[0].source_location.start_line == 1
        assert body[1].source_location.start_line == 2
        assert str(body[1].source_location) == "2:0-2:10"


class TestRendering:
    def test_program_renders_as_source_like_text(self):
        program = _lower_js("function f() { var z = 2; }\nf();")
        assert str(program) == "function f() {\n  var z = 2;\n}\nf();"

    def test_object_and_assignment_rendering(self):
        program = _lower_js("let o = { a: 1 }; o.a = 'x';")
        assert str(program) == 'let o = { a: 1 };\no.a = "x";'
