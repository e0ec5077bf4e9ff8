"""
Recursive descent parser for the minicalc expression language.

Grammar (precedence low to high):
    parse       → term EOF
    term        → factor (("+" | "-") factor)*
    factor      → primary (("*" | "/") primary)*
    primary     → "(" term ")" | NUMBER

The parser never raises on bad input. When a token is missing it records a
diagnostic and manufactures a placeholder token of the expected kind, so a
complete tree is always returned.
"""

from __future__ import annotations

import logging

from minicalc.core.expression_lang.lexer import INT_MAX, Lexer
from minicalc.core.ir.syntax import (
    BinaryExpr,
    ExpressionSyntax,
    NumberExpr,
    ParenthesizedExpr,
    SyntaxKind,
    SyntaxToken,
    SyntaxTree,
)

logger = logging.getLogger(__name__)

_SKIPPED_KINDS = (SyntaxKind.WHITESPACE_TOKEN, SyntaxKind.BAD_TOKEN)
_TERM_OPERATORS = (SyntaxKind.PLUS_TOKEN, SyntaxKind.MINUS_TOKEN)
_FACTOR_OPERATORS = (SyntaxKind.STAR_TOKEN, SyntaxKind.SLASH_TOKEN)

# Each parenthesis level costs three Python frames; stay well under the
# interpreter's recursion limit.
MAX_NESTING_DEPTH = 100


class Parser:
    """Builds a syntax tree from one line of text."""

    def __init__(
        self,
        text: str,
        max_int: int = INT_MAX,
        max_depth: int = MAX_NESTING_DEPTH,
    ) -> None:
        lexer = Lexer(text, max_int=max_int)
        tokens: list[SyntaxToken] = []
        while True:
            token = lexer.next_token()
            if token.kind not in _SKIPPED_KINDS:
                tokens.append(token)
            if token.kind == SyntaxKind.END_OF_FILE_TOKEN:
                break

        self.tokens = tokens
        self.pos = 0
        self.depth = 0
        self.max_depth = max_depth
        # Keep what the lexer reported
        self._diagnostics: list[str] = list(lexer.diagnostics)
        logger.debug("Lexed %d significant tokens from %r", len(tokens), text)

    @property
    def diagnostics(self) -> tuple[str, ...]:
        return tuple(self._diagnostics)

    def peek(self, offset: int = 0) -> SyntaxToken:
        idx = self.pos + offset
        if idx < len(self.tokens):
            return self.tokens[idx]
        return self.tokens[-1]  # EOF

    @property
    def current(self) -> SyntaxToken:
        return self.peek(0)

    def advance(self) -> SyntaxToken:
        tok = self.current
        self.pos += 1
        return tok

    def expect(self, kind: SyntaxKind) -> SyntaxToken:
        tok = self.current
        if tok.kind == kind:
            return self.advance()

        message = f"Error: Unexpected token <{tok.kind}>, expected <{kind}>"
        logger.debug("Parser diagnostic at %d: %s", tok.position, message)
        self._diagnostics.append(message)
        return SyntaxToken(kind=kind, position=tok.position)

    # -- Grammar rules --

    def parse(self) -> SyntaxTree:
        """term EOF"""
        expression = self.parse_term()
        end_of_file_token = self.expect(SyntaxKind.END_OF_FILE_TOKEN)
        return SyntaxTree(
            diagnostics=self.diagnostics,
            root=expression,
            end_of_file_token=end_of_file_token,
        )

    def parse_term(self) -> ExpressionSyntax:
        """factor (('+' | '-') factor)*"""
        left = self.parse_factor()
        while self.current.kind in _TERM_OPERATORS:
            operator_token = self.advance()
            right = self.parse_factor()
            left = BinaryExpr(left=left, operator_token=operator_token, right=right)
        return left

    def parse_factor(self) -> ExpressionSyntax:
        """primary (('*' | '/') primary)*"""
        left = self.parse_primary()
        while self.current.kind in _FACTOR_OPERATORS:
            operator_token = self.advance()
            right = self.parse_primary()
            left = BinaryExpr(left=left, operator_token=operator_token, right=right)
        return left

    def parse_primary(self) -> ExpressionSyntax:
        """'(' term ')' | NUMBER"""
        if self.current.kind == SyntaxKind.OPEN_PARENTHESIS_TOKEN:
            if self.depth >= self.max_depth:
                return self._skip_too_deep()

            open_token = self.advance()
            self.depth += 1
            expression = self.parse_term()
            self.depth -= 1
            close_token = self.expect(SyntaxKind.CLOSE_PARENTHESIS_TOKEN)
            return ParenthesizedExpr(
                open_parenthesis_token=open_token,
                expression=expression,
                close_parenthesis_token=close_token,
            )

        number_token = self.expect(SyntaxKind.NUMBER_TOKEN)
        return NumberExpr(number_token=number_token)

    def _skip_too_deep(self) -> NumberExpr:
        """Skip a group nested past ``max_depth`` and stand in a placeholder.

        Tokens are consumed up to the matching ')' or EOF.
        """
        start = self.current
        message = f"Error: Parentheses nested deeper than {self.max_depth} levels"
        logger.debug("Parser diagnostic at %d: %s", start.position, message)
        self._diagnostics.append(message)

        open_groups = 0
        while self.current.kind != SyntaxKind.END_OF_FILE_TOKEN:
            tok = self.advance()
            if tok.kind == SyntaxKind.OPEN_PARENTHESIS_TOKEN:
                open_groups += 1
            elif tok.kind == SyntaxKind.CLOSE_PARENTHESIS_TOKEN:
                open_groups -= 1
                if open_groups == 0:
                    break

        return NumberExpr(
            number_token=SyntaxToken(kind=SyntaxKind.NUMBER_TOKEN, position=start.position)
        )


def parse(
    source: str,
    max_int: int = INT_MAX,
    max_depth: int = MAX_NESTING_DEPTH,
) -> SyntaxTree:
    """Parse a line of text into a syntax tree.

    Args:
        source: Expression text (e.g., "(1 + 2) * 3")
        max_int: Largest integer literal accepted as valid.
        max_depth: Deepest parenthesis nesting parsed before giving up on
            a group with a diagnostic.

    Returns:
        The syntax tree. It is always complete; check ``diagnostics`` before
        evaluating ``root``.
    """
    return Parser(source, max_int=max_int, max_depth=max_depth).parse()
