"""
minicalc expression language.

Lexer, parser, evaluator, and tree printer for integer arithmetic.

Usage:
    from minicalc.core.expression_lang import parse, evaluate

    tree = parse("(1 + 2) * 3")
    if not tree.diagnostics:
        result = evaluate(tree.root)
        # result == 9
"""

from minicalc.core.errors import DiagnosticsPresentError
from minicalc.core.expression_lang.evaluator import Evaluator, evaluate
from minicalc.core.expression_lang.lexer import INT_MAX, Lexer, lex
from minicalc.core.expression_lang.parser import Parser, parse
from minicalc.core.expression_lang.printer import pretty_print


def calculate(source: str, max_int: int = INT_MAX) -> int:
    """Parse and evaluate a line of text in one step.

    Raises:
        DiagnosticsPresentError: If the text has lexical or syntax errors.
        EvaluationError: If the expression cannot be evaluated.
    """
    tree = parse(source, max_int=max_int)
    if tree.diagnostics:
        raise DiagnosticsPresentError(tree.diagnostics)
    return evaluate(tree.root)


__all__ = [
    "Evaluator",
    "Lexer",
    "Parser",
    "calculate",
    "evaluate",
    "lex",
    "parse",
    "pretty_print",
]
