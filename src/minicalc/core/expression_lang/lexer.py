"""
Lexer for the minicalc expression language.

Converts a line of text into classified tokens, one token per call to
``Lexer.next_token()``. Malformed input never raises: it is recorded in
``Lexer.diagnostics`` and lexing carries on past the offending characters.
"""

from __future__ import annotations

import logging
import re

from minicalc.core.ir.syntax import SyntaxKind, SyntaxToken

logger = logging.getLogger(__name__)

# Largest literal accepted as a valid Int (signed 32-bit)
INT_MAX = 2**31 - 1

_NUMBER_RE = re.compile(r"\d+")
_WHITESPACE_RE = re.compile(r"\s+")

_SINGLE_CHAR_KINDS: dict[str, SyntaxKind] = {
    "+": SyntaxKind.PLUS_TOKEN,
    "-": SyntaxKind.MINUS_TOKEN,
    "*": SyntaxKind.STAR_TOKEN,
    "/": SyntaxKind.SLASH_TOKEN,
    "(": SyntaxKind.OPEN_PARENTHESIS_TOKEN,
    ")": SyntaxKind.CLOSE_PARENTHESIS_TOKEN,
}


class Lexer:
    """Pull-based tokenizer over a single line of text."""

    def __init__(self, text: str, max_int: int = INT_MAX) -> None:
        self._text = text
        self._position = 0
        self._max_int = max_int
        self._diagnostics: list[str] = []

    @property
    def diagnostics(self) -> tuple[str, ...]:
        """Errors recorded so far, in the order they were found."""
        return tuple(self._diagnostics)

    def next_token(self) -> SyntaxToken:
        """Return the next token and advance past it.

        Once the end of the text is reached every further call returns an
        end-of-file token.
        """
        text = self._text
        start = self._position

        if start >= len(text):
            return SyntaxToken(kind=SyntaxKind.END_OF_FILE_TOKEN, position=start, text="")

        c = text[start]

        if c.isdecimal():
            m = _NUMBER_RE.match(text, start)
            assert m is not None
            self._position = m.end()
            return self._number_token(m.group(0), start)

        if c.isspace():
            m = _WHITESPACE_RE.match(text, start)
            self._position = m.end() if m is not None else start + 1
            return SyntaxToken(
                kind=SyntaxKind.WHITESPACE_TOKEN,
                position=start,
                text=text[start : self._position],
            )

        self._position += 1

        kind = _SINGLE_CHAR_KINDS.get(c)
        if kind is not None:
            return SyntaxToken(kind=kind, position=start, text=c)

        self._report(f"Error: Bad character input->  `{c}`", start)
        return SyntaxToken(kind=SyntaxKind.BAD_TOKEN, position=start, text=c)

    def tokens(self) -> list[SyntaxToken]:
        """Drain the lexer, returning every token up to and including EOF."""
        result: list[SyntaxToken] = []
        while True:
            token = self.next_token()
            result.append(token)
            if token.kind == SyntaxKind.END_OF_FILE_TOKEN:
                return result

    def _number_token(self, digits: str, start: int) -> SyntaxToken:
        value: int | None
        try:
            value = int(digits)
        except ValueError:
            value = None

        if value is None or value > self._max_int:
            # The message quotes the whole line, not just the literal
            self._report(f"The number {self._text} is not a valid Int", start)
            value = None

        return SyntaxToken(kind=SyntaxKind.NUMBER_TOKEN, position=start, text=digits, value=value)

    def _report(self, message: str, position: int) -> None:
        logger.debug("Lexer diagnostic at %d: %s", position, message)
        self._diagnostics.append(message)


def lex(text: str, max_int: int = INT_MAX) -> list[SyntaxToken]:
    """Tokenize a line of text.

    Args:
        text: Source line (e.g., "1 + 2 * 3")
        max_int: Largest integer literal accepted as valid.

    Returns:
        All tokens, whitespace and bad tokens included, ending with EOF.
    """
    return Lexer(text, max_int=max_int).tokens()
