"""
minicalc - integer arithmetic expression evaluator.

Reads a line such as ``(1 + 2) * 3`` and produces either a single integer
or diagnostics describing why the input is invalid.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import (
    CalcError,
    DiagnosticsPresentError,
    DivisionByZeroError,
    EvaluationError,
    InvalidSyntaxTreeError,
)
from .core.expression_lang import calculate, evaluate, lex, parse, pretty_print

__version__ = get_version()

__all__ = [
    "__version__",
    "CalcError",
    "DiagnosticsPresentError",
    "DivisionByZeroError",
    "EvaluationError",
    "InvalidSyntaxTreeError",
    "calculate",
    "evaluate",
    "lex",
    "parse",
    "pretty_print",
]
