"""Syntax tree — a closed tagged union over the supported JavaScript node kinds."""

from __future__ import annotations

import json
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class NodeKind(str, Enum):
    # Statements
    FUNCTION_DECLARATION = "FunctionDeclaration"
    VARIABLE_DECLARATION = "VariableDeclaration"
    EXPRESSION_STATEMENT = "ExpressionStatement"
    UNSUPPORTED_STATEMENT = "UnsupportedStatement"
    # Expressions
    IDENTIFIER = "Identifier"
    STRING_LITERAL = "StringLiteral"
    NUMERIC_LITERAL = "NumericLiteral"
    OBJECT_EXPRESSION = "ObjectExpression"
    MEMBER_EXPRESSION = "MemberExpression"
    ASSIGNMENT_EXPRESSION = "AssignmentExpression"
    CALL_EXPRESSION = "CallExpression"
    UNSUPPORTED_EXPRESSION = "UnsupportedExpression"


class DeclarationKind(str, Enum):
    VAR = "var"
    LET = "let"
    CONST = "const"


class SourceLocation(BaseModel):
    """Structured source span from tree-sitter AST nodes."""

    model_config = ConfigDict(frozen=True)

    start_line: int
    start_col: int
    end_line: int
    end_col: int

    def is_unknown(self) -> bool:
        return (
            self.start_line == 0
            and self.start_col == 0
            and self.end_line == 0
            and self.end_col == 0
        )

    def __str__(self) -> str:
        if self.is_unknown():
            return "<unknown>"
        return f"{self.start_line}:{self.start_col}-{self.end_line}:{self.end_col}"


NO_SOURCE_LOCATION = SourceLocation(start_line=0, start_col=0, end_line=0, end_col=0)


class SyntaxNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    source_location: SourceLocation = NO_SOURCE_LOCATION


# ── Expressions ──────────────────────────────────────────────────


class Identifier(SyntaxNode):
    kind: Literal[NodeKind.IDENTIFIER] = NodeKind.IDENTIFIER
    name: str

    def __str__(self) -> str:
        return self.name


class StringLiteral(SyntaxNode):
    kind: Literal[NodeKind.STRING_LITERAL] = NodeKind.STRING_LITERAL
    value: str

    def __str__(self) -> str:
        return json.dumps(self.value)


class NumericLiteral(SyntaxNode):
    kind: Literal[NodeKind.NUMERIC_LITERAL] = NodeKind.NUMERIC_LITERAL
    value: Union[int, float]

    def __str__(self) -> str:
        return str(self.value)


class ObjectProperty(SyntaxNode):
    key: str
    value: Expression

    def __str__(self) -> str:
        return f"{self.key}: {self.value}"


class ObjectExpression(SyntaxNode):
    kind: Literal[NodeKind.OBJECT_EXPRESSION] = NodeKind.OBJECT_EXPRESSION
    properties: list[ObjectProperty] = []

    def __str__(self) -> str:
        if not self.properties:
            return "{}"
        return "{ " + ", ".join(str(p) for p in self.properties) + " }"


class MemberExpression(SyntaxNode):
    kind: Literal[NodeKind.MEMBER_EXPRESSION] = NodeKind.MEMBER_EXPRESSION
    object: Expression
    property: str

    def __str__(self) -> str:
        return f"{self.object}.{self.property}"


class AssignmentExpression(SyntaxNode):
    kind: Literal[NodeKind.ASSIGNMENT_EXPRESSION] = NodeKind.ASSIGNMENT_EXPRESSION
    target: Expression
    value: Expression

    def __str__(self) -> str:
        return f"{self.target} = {self.value}"


class CallExpression(SyntaxNode):
    kind: Literal[NodeKind.CALL_EXPRESSION] = NodeKind.CALL_EXPRESSION
    callee: Expression
    arguments: list[Expression] = []

    def __str__(self) -> str:
        return f"{self.callee}(" + ", ".join(str(a) for a in self.arguments) + ")"


class UnsupportedExpression(SyntaxNode):
    """Any construct outside the supported vocabulary; evaluates to undefined."""

    kind: Literal[NodeKind.UNSUPPORTED_EXPRESSION] = NodeKind.UNSUPPORTED_EXPRESSION
    node_type: str

    def __str__(self) -> str:
        return f"<unsupported:{self.node_type}>"


Expression = Annotated[
    Union[
        Identifier,
        StringLiteral,
        NumericLiteral,
        ObjectExpression,
        MemberExpression,
        AssignmentExpression,
        CallExpression,
        UnsupportedExpression,
    ],
    Field(discriminator="kind"),
]


# ── Statements ───────────────────────────────────────────────────


class VariableDeclarator(SyntaxNode):
    name: str
    init: Optional[Expression] = None

    def __str__(self) -> str:
        if self.init is None:
            return self.name
        return f"{self.name} = {self.init}"


class VariableDeclaration(SyntaxNode):
    kind: Literal[NodeKind.VARIABLE_DECLARATION] = NodeKind.VARIABLE_DECLARATION
    declaration_kind: DeclarationKind
    declarators: list[VariableDeclarator] = []

    def __str__(self) -> str:
        decls = ", ".join(str(d) for d in self.declarators)
        return f"{self.declaration_kind.value} {decls};"


class ExpressionStatement(SyntaxNode):
    kind: Literal[NodeKind.EXPRESSION_STATEMENT] = NodeKind.EXPRESSION_STATEMENT
    expression: Expression

    def __str__(self) -> str:
        return f"{self.expression};"


class FunctionDeclaration(SyntaxNode):
    kind: Literal[NodeKind.FUNCTION_DECLARATION] = NodeKind.FUNCTION_DECLARATION
    name: str
    params: list[str] = []
    body: list[Statement] = []

    def __str__(self) -> str:
        header = f"function {self.name}(" + ", ".join(self.params) + ") {"
        if not self.body:
            return header + "}"
        inner = "\n".join(
            "  " + line for stmt in self.body for line in str(stmt).splitlines()
        )
        return f"{header}\n{inner}\n}}"


class UnsupportedStatement(SyntaxNode):
    """Loops, conditionals, returns and the like; inert when executed."""

    kind: Literal[NodeKind.UNSUPPORTED_STATEMENT] = NodeKind.UNSUPPORTED_STATEMENT
    node_type: str

    def __str__(self) -> str:
        return f"<unsupported:{self.node_type}>"


Statement = Annotated[
    Union[
        FunctionDeclaration,
        VariableDeclaration,
        ExpressionStatement,
        UnsupportedStatement,
    ],
    Field(discriminator="kind"),
]


class Program(SyntaxNode):
    body: list[Statement] = []

    def __str__(self) -> str:
        return "\n".join(str(stmt) for stmt in self.body)


for _model in (
    ObjectProperty,
    ObjectExpression,
    MemberExpression,
    AssignmentExpression,
    CallExpression,
    VariableDeclarator,
    VariableDeclaration,
    ExpressionStatement,
    FunctionDeclaration,
    Program,
):
    _model.model_rebuild()
