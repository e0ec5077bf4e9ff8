"""
Expression evaluator for the minicalc expression language.

Walks a syntax tree and computes its integer value. Pure evaluation, no
I/O and no side effects. The tree must come from a parse that produced no
diagnostics.
"""

from __future__ import annotations

import logging

from minicalc.core.errors import DivisionByZeroError, InvalidSyntaxTreeError
from minicalc.core.ir.syntax import (
    BinaryExpr,
    ExpressionSyntax,
    NumberExpr,
    ParenthesizedExpr,
    SyntaxKind,
)

logger = logging.getLogger(__name__)


class Evaluator:
    """Computes the value of a single expression tree."""

    def __init__(self, root: ExpressionSyntax) -> None:
        self._root = root

    def evaluate(self) -> int:
        """Evaluate the tree.

        Raises:
            DivisionByZeroError: If a divisor evaluates to zero.
            InvalidSyntaxTreeError: If the tree holds nodes the parser
                cannot produce from diagnostics-free input.
        """
        result = _interpret(self._root)
        logger.debug("Evaluated %s = %d", self._root, result)
        return result


def evaluate(root: ExpressionSyntax) -> int:
    """Evaluate an expression tree to an integer."""
    return Evaluator(root).evaluate()


def _interpret(root: ExpressionSyntax) -> int:
    """Post-order walk with an explicit stack.

    Left-folded operator chains make trees as deep as the line is long, so
    the walk does not use Python recursion.
    """
    values: list[int] = []
    # (node, operands already evaluated)
    pending: list[tuple[ExpressionSyntax, bool]] = [(root, False)]

    while pending:
        node, operands_ready = pending.pop()

        if isinstance(node, NumberExpr):
            value = node.number_token.value
            if value is None:
                raise InvalidSyntaxTreeError(
                    "Number expression has no integer value", node.number_token.position
                )
            values.append(value)
        elif isinstance(node, ParenthesizedExpr):
            pending.append((node.expression, False))
        elif isinstance(node, BinaryExpr):
            if operands_ready:
                right = values.pop()
                left = values.pop()
                values.append(_apply_binary(node, left, right))
            else:
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))
        else:
            raise InvalidSyntaxTreeError(f"Unexpected node {type(node).__name__}")

    return values.pop()


def _apply_binary(node: BinaryExpr, left: int, right: int) -> int:
    """Combine evaluated operands of a binary expression."""
    op = node.operator_token

    if op.kind == SyntaxKind.PLUS_TOKEN:
        return left + right
    if op.kind == SyntaxKind.MINUS_TOKEN:
        return left - right
    if op.kind == SyntaxKind.STAR_TOKEN:
        return left * right
    if op.kind == SyntaxKind.SLASH_TOKEN:
        if right == 0:
            raise DivisionByZeroError("Division by zero", op.position)
        return _truncating_div(left, right)

    raise InvalidSyntaxTreeError(f"Unexpected binary operator {op.kind}", op.position)


def _truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient
