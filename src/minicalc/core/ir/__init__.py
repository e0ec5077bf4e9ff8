"""
Intermediate representation for minicalc: tokens and syntax trees.
"""

from .syntax import (
    BINARY_OPERATOR_KINDS,
    BinaryExpr,
    ExpressionSyntax,
    NumberExpr,
    ParenthesizedExpr,
    SyntaxKind,
    SyntaxNode,
    SyntaxToken,
    SyntaxTree,
)

__all__ = [
    "BINARY_OPERATOR_KINDS",
    "BinaryExpr",
    "ExpressionSyntax",
    "NumberExpr",
    "ParenthesizedExpr",
    "SyntaxKind",
    "SyntaxNode",
    "SyntaxToken",
    "SyntaxTree",
]
