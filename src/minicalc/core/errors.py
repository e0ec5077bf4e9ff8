"""
Error types for minicalc evaluation.

Lexing and parsing never raise for bad input: they record diagnostics on
the syntax tree instead. The exceptions below cover what happens after
parsing.
"""


class CalcError(Exception):
    """Base exception for all minicalc errors."""

    def __init__(self, message: str, position: int | None = None):
        self.message = message
        self.position = position
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the source position if available."""
        if self.position is not None:
            return f"{self.message} (at position {self.position})"
        return self.message


class EvaluationError(CalcError):
    """
    Raised when a well-formed tree cannot be evaluated.

    These are reported to the user separately from parse diagnostics.
    """

    pass


class DivisionByZeroError(EvaluationError):
    """Raised when the right operand of ``/`` evaluates to zero."""

    pass


class InvalidSyntaxTreeError(CalcError):
    """
    Raised when the evaluator meets a tree the parser cannot produce.

    Examples:
    - Number expression without an integer payload
    - Unknown expression node type
    - Binary expression with a non-arithmetic operator
    """

    pass


class DiagnosticsPresentError(CalcError):
    """Raised when evaluation is requested for a tree that has diagnostics."""

    def __init__(self, diagnostics: tuple[str, ...]):
        self.diagnostics = diagnostics
        super().__init__("; ".join(diagnostics))
