"""JavaScriptFrontend — tree-sitter JavaScript CST → closed syntax-tree vocabulary.

Every tree-sitter node type the simulator understands has an entry in
``_STMT_DISPATCH`` or ``_EXPR_DISPATCH``. Anything else still lowers, as an
``UnsupportedStatement`` / ``UnsupportedExpression`` carrying the original
node type, so the executor can treat it as an explicit inert branch.
"""

from __future__ import annotations

import logging
from typing import Callable

from .ast_nodes import (
    AssignmentExpression,
    CallExpression,
    DeclarationKind,
    ExpressionStatement,
    FunctionDeclaration,
    Identifier,
    MemberExpression,
    NumericLiteral,
    ObjectExpression,
    ObjectProperty,
    Program,
    SourceLocation,
    StringLiteral,
    UnsupportedExpression,
    UnsupportedStatement,
    VariableDeclaration,
    VariableDeclarator,
)

logger = logging.getLogger(__name__)

_SIMPLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
    "\n": "",
}


def _decode_escape(text: str) -> str:
    """Decode one JavaScript escape sequence such as ``\\n`` or ``\\u0041``."""
    body = text[1:]
    if body in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[body]
    if body.startswith("u{") and body.endswith("}"):
        return chr(int(body[2:-1], 16))
    if body.startswith(("u", "x")) and len(body) > 1:
        return chr(int(body[1:], 16))
    return body


def _parse_number(raw: str) -> int | float:
    """Parse a JavaScript numeric literal into a Python number."""
    text = raw.replace("_", "")
    if text.endswith("n"):
        text = text[:-1]
    if len(text) > 1 and text[0] == "0" and text.isdigit():
        # Legacy octal (010 == 8) unless a digit 8 or 9 makes it decimal.
        return int(text, 8) if set(text) <= set("01234567") else int(text, 10)
    try:
        return int(text, 0)
    except ValueError:
        pass
    return float(text)


class JavaScriptFrontend:
    """Lowers a JavaScript tree-sitter tree into a ``Program``."""

    COMMENT_TYPES: frozenset[str] = frozenset({"comment", "html_comment"})
    NOISE_TYPES: frozenset[str] = frozenset(
        {"\n", "hash_bang_line", "empty_statement", ";"}
    )

    def __init__(self):
        self._source: bytes = b""
        self._STMT_DISPATCH: dict[str, Callable] = {
            "function_declaration": self._lower_function_declaration,
            "variable_declaration": self._lower_var_declaration,
            "lexical_declaration": self._lower_var_declaration,
            "expression_statement": self._lower_expression_statement,
        }
        self._EXPR_DISPATCH: dict[str, Callable] = {
            "identifier": self._lower_identifier,
            "number": self._lower_number,
            "string": self._lower_string,
            "object": self._lower_object,
            "member_expression": self._lower_member,
            "assignment_expression": self._lower_assignment,
            "call_expression": self._lower_call,
            "parenthesized_expression": self._lower_paren,
        }

    # ── helpers ──────────────────────────────────────────────────

    def _node_text(self, node) -> str:
        return self._source[node.start_byte : node.end_byte].decode("utf-8")

    def _source_loc(self, node) -> SourceLocation:
        s, e = node.start_point, node.end_point
        return SourceLocation(
            start_line=s[0] + 1,
            start_col=s[1],
            end_line=e[0] + 1,
            end_col=e[1],
        )

    def _named_children(self, node) -> list:
        return [
            child
            for child in node.children
            if child.is_named and child.type not in self.COMMENT_TYPES
        ]

    # ── entry point ──────────────────────────────────────────────

    def lower(self, tree, source: bytes) -> Program:
        self._source = source
        root = tree.root_node
        return Program(
            body=self._lower_statements(root), source_location=self._source_loc(root)
        )

    # ── dispatchers ──────────────────────────────────────────────

    def _lower_statements(self, node) -> list:
        body = []
        for child in node.children:
            if not child.is_named:
                continue
            stmt = self._lower_stmt(child)
            if stmt is not None:
                body.append(stmt)
        return body

    def _lower_stmt(self, node):
        ntype = node.type
        if ntype in self.COMMENT_TYPES or ntype in self.NOISE_TYPES:
            return None
        handler = self._STMT_DISPATCH.get(ntype)
        if handler:
            return handler(node)
        logger.debug("Unsupported statement lowered as inert: %s", ntype)
        return UnsupportedStatement(
            node_type=ntype, source_location=self._source_loc(node)
        )

    def _lower_expr(self, node):
        handler = self._EXPR_DISPATCH.get(node.type)
        if handler:
            return handler(node)
        return UnsupportedExpression(
            node_type=node.type, source_location=self._source_loc(node)
        )

    # ── statements ───────────────────────────────────────────────

    def _lower_function_declaration(self, node) -> FunctionDeclaration:
        name_node = node.child_by_field_name("name")
        params_node = node.child_by_field_name("parameters")
        body_node = node.child_by_field_name("body")
        params = []
        if params_node is not None:
            params = [
                self._node_text(p)
                for p in self._named_children(params_node)
                if p.type == "identifier"
            ]
        return FunctionDeclaration(
            name=self._node_text(name_node),
            params=params,
            body=self._lower_statements(body_node) if body_node is not None else [],
            source_location=self._source_loc(node),
        )

    def _declaration_kind(self, node) -> DeclarationKind:
        kind_node = node.child_by_field_name("kind")
        keyword = self._node_text(kind_node) if kind_node else node.children[0].type
        return DeclarationKind(keyword)

    def _lower_var_declaration(self, node):
        """Lower ``variable_declaration`` / ``lexical_declaration``."""
        try:
            kind = self._declaration_kind(node)
        except ValueError:
            return UnsupportedStatement(
                node_type=node.type, source_location=self._source_loc(node)
            )
        declarators = []
        for child in node.children:
            if child.type != "variable_declarator":
                continue
            name_node = child.child_by_field_name("name")
            value_node = child.child_by_field_name("value")
            if name_node is None or name_node.type != "identifier":
                logger.warning(
                    "Skipping unsupported declarator: %s", self._node_text(child)[:40]
                )
                continue
            declarators.append(
                VariableDeclarator(
                    name=self._node_text(name_node),
                    init=self._lower_expr(value_node) if value_node else None,
                    source_location=self._source_loc(child),
                )
            )
        return VariableDeclaration(
            declaration_kind=kind,
            declarators=declarators,
            source_location=self._source_loc(node),
        )

    def _lower_expression_statement(self, node):
        children = self._named_children(node)
        if not children:
            return None
        return ExpressionStatement(
            expression=self._lower_expr(children[0]),
            source_location=self._source_loc(node),
        )

    # ── expressions ──────────────────────────────────────────────

    def _lower_identifier(self, node) -> Identifier:
        return Identifier(
            name=self._node_text(node), source_location=self._source_loc(node)
        )

    def _lower_number(self, node) -> NumericLiteral:
        return NumericLiteral(
            value=_parse_number(self._node_text(node)),
            source_location=self._source_loc(node),
        )

    def _lower_string(self, node) -> StringLiteral:
        parts = []
        for child in node.children:
            if child.type == "string_fragment":
                parts.append(self._node_text(child))
            elif child.type == "escape_sequence":
                parts.append(_decode_escape(self._node_text(child)))
        return StringLiteral(
            value="".join(parts), source_location=self._source_loc(node)
        )

    def _lower_object(self, node) -> ObjectExpression:
        properties = []
        for child in self._named_children(node):
            if child.type == "pair":
                key_node = child.child_by_field_name("key")
                value_node = child.child_by_field_name("value")
                if key_node.type != "property_identifier":
                    logger.debug("Skipping non-identifier key: %s", key_node.type)
                    continue
                key = self._node_text(key_node)
                value = self._lower_expr(value_node)
            elif child.type == "shorthand_property_identifier":
                key = self._node_text(child)
                value = self._lower_identifier(child)
            else:
                logger.debug("Skipping object member: %s", child.type)
                continue
            properties.append(
                ObjectProperty(
                    key=key, value=value, source_location=self._source_loc(child)
                )
            )
        return ObjectExpression(
            properties=properties, source_location=self._source_loc(node)
        )

    def _lower_member(self, node):
        obj_node = node.child_by_field_name("object")
        prop_node = node.child_by_field_name("property")
        if prop_node is None or prop_node.type not in (
            "property_identifier",
            "private_property_identifier",
        ):
            return UnsupportedExpression(
                node_type=node.type, source_location=self._source_loc(node)
            )
        return MemberExpression(
            object=self._lower_expr(obj_node),
            property=self._node_text(prop_node),
            source_location=self._source_loc(node),
        )

    def _lower_assignment(self, node) -> AssignmentExpression:
        return AssignmentExpression(
            target=self._lower_expr(node.child_by_field_name("left")),
            value=self._lower_expr(node.child_by_field_name("right")),
            source_location=self._source_loc(node),
        )

    def _lower_call(self, node) -> CallExpression:
        args_node = node.child_by_field_name("arguments")
        arguments = []
        if args_node is not None and args_node.type == "arguments":
            arguments = [self._lower_expr(a) for a in self._named_children(args_node)]
        return CallExpression(
            callee=self._lower_expr(node.child_by_field_name("function")),
            arguments=arguments,
            source_location=self._source_loc(node),
        )

    def _lower_paren(self, node):
        children = self._named_children(node)
        if len(children) != 1:
            return UnsupportedExpression(
                node_type=node.type, source_location=self._source_loc(node)
            )
        return self._lower_expr(children[0])
