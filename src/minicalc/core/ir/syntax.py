"""
Syntax tree types for the minicalc expression language.

Tokens and expression nodes are immutable pydantic models. Every node
exposes ``kind`` and ``get_children()`` so that tree walkers (the printer,
tests) can traverse a tree without knowing node internals.

Supports:
- Integer literals: 42
- Arithmetic: +, -, *, /
- Grouping: (1 + 2) * 3
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------------------------------------------------------------------------
# Kinds
# ---------------------------------------------------------------------------


class SyntaxKind(StrEnum):
    """Discriminant for tokens and expression nodes."""

    # Tokens
    NUMBER_TOKEN = "NumberToken"
    WHITESPACE_TOKEN = "WhitespaceToken"
    PLUS_TOKEN = "PlusToken"
    MINUS_TOKEN = "MinusToken"
    STAR_TOKEN = "StarToken"
    SLASH_TOKEN = "SlashToken"
    # Values keep the historical "Paranthesis" spelling used in diagnostics
    OPEN_PARENTHESIS_TOKEN = "OpenParanthesisToken"
    CLOSE_PARENTHESIS_TOKEN = "CloseParanthesisToken"
    BAD_TOKEN = "BadToken"
    END_OF_FILE_TOKEN = "EndOfFileToken"

    # Expressions
    NUMBER_EXPRESSION = "NumberExpression"
    BINARY_EXPRESSION = "BinaryExpression"
    PARENTHESIZED_EXPRESSION = "ParenthesizedExpression"


BINARY_OPERATOR_KINDS = frozenset(
    {
        SyntaxKind.PLUS_TOKEN,
        SyntaxKind.MINUS_TOKEN,
        SyntaxKind.STAR_TOKEN,
        SyntaxKind.SLASH_TOKEN,
    }
)


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------


class SyntaxToken(BaseModel):
    """
    A classified slice of source text.

    ``text`` is None only for tokens manufactured by the parser during error
    recovery. ``value`` holds the parsed integer for number tokens and is
    None everywhere else, including number tokens that failed to parse.
    """

    kind: SyntaxKind
    position: int = Field(ge=0, description="Offset of the token in the source")
    text: str | None = Field(default=None, description="Source text of the token")
    value: int | None = Field(default=None, description="Integer payload")

    model_config = ConfigDict(frozen=True)

    def get_children(self) -> list[SyntaxNode]:
        return []

    @property
    def is_missing(self) -> bool:
        """True for placeholder tokens inserted by the parser."""
        return self.text is None

    def __str__(self) -> str:
        return self.text or ""


# ---------------------------------------------------------------------------
# Expression nodes
# ---------------------------------------------------------------------------


class NumberExpr(BaseModel):
    """An integer literal."""

    number_token: SyntaxToken

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.NUMBER_EXPRESSION

    def get_children(self) -> list[SyntaxNode]:
        return [self.number_token]

    def __str__(self) -> str:
        return str(self.number_token)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    left: ExpressionSyntax
    operator_token: SyntaxToken
    right: ExpressionSyntax

    model_config = ConfigDict(frozen=True)

    @field_validator("operator_token")
    @classmethod
    def _check_operator(cls, token: SyntaxToken) -> SyntaxToken:
        if token.kind not in BINARY_OPERATOR_KINDS:
            raise ValueError(f"{token.kind} is not a binary operator")
        return token

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.BINARY_EXPRESSION

    def get_children(self) -> list[SyntaxNode]:
        return [self.left, self.operator_token, self.right]

    def __str__(self) -> str:
        return _format_expression(self)


class ParenthesizedExpr(BaseModel):
    """An expression wrapped in parentheses."""

    open_parenthesis_token: SyntaxToken
    expression: ExpressionSyntax
    close_parenthesis_token: SyntaxToken

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.PARENTHESIZED_EXPRESSION

    def get_children(self) -> list[SyntaxNode]:
        return [self.open_parenthesis_token, self.expression, self.close_parenthesis_token]

    def __str__(self) -> str:
        return _format_expression(self)


# ---------------------------------------------------------------------------
# Union types
# ---------------------------------------------------------------------------

ExpressionSyntax = NumberExpr | BinaryExpr | ParenthesizedExpr

SyntaxNode = SyntaxToken | ExpressionSyntax


def _format_expression(root: ExpressionSyntax) -> str:
    """Render an expression with explicit grouping, e.g. ``(1 + (2 * 3))``.

    Uses a work stack so that long operator chains do not recurse.
    """
    parts: list[str] = []
    pending: list[str | ExpressionSyntax] = [root]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, BinaryExpr):
            pending.extend(reversed(["(", item.left, f" {item.operator_token} ", item.right, ")"]))
        elif isinstance(item, ParenthesizedExpr):
            pending.extend(reversed(["(", item.expression, ")"]))
        else:
            parts.append(str(item.number_token))
    return "".join(parts)


class SyntaxTree(BaseModel):
    """
    Result of parsing one line of input.

    The tree is always complete, even for invalid input. Callers must check
    ``diagnostics`` before handing ``root`` to the evaluator.
    """

    diagnostics: tuple[str, ...] = Field(default=(), description="Lexer and parser errors")
    root: ExpressionSyntax
    end_of_file_token: SyntaxToken

    model_config = ConfigDict(frozen=True)

    @property
    def has_errors(self) -> bool:
        return bool(self.diagnostics)


# Rebuild models for recursive forward references
SyntaxToken.model_rebuild()
NumberExpr.model_rebuild()
BinaryExpr.model_rebuild()
ParenthesizedExpr.model_rebuild()
SyntaxTree.model_rebuild()
