"""keylang lexer — hand-written, pull-based tokenizer.

Design decisions:
- One token per `next_token()` call; nothing is buffered ahead.
- Whitespace (space, tab, newline, carriage return) is discarded.
- Unknown characters become ILLEGAL tokens and scanning continues,
  unless the lexer is constructed with ``strict=True``.
- Exactly one EOF ends the stream; asking again keeps returning EOF.
"""

from __future__ import annotations

import logging
from typing import Iterator

from keylang.lexer.tokens import OPERATORS, SYMBOLS, Token, TokenKind, lookup_ident

logger = logging.getLogger(__name__)

_WHITESPACE = frozenset(" \t\n\r")


class LexerError(Exception):
    """Raised on lexical errors with source location."""

    def __init__(self, message: str, line: int, column: int, file: str = "<unknown>"):
        self.line = line
        self.column = column
        self.file = file
        super().__init__(f"{file}:{line}:{column}: {message}")


class Lexer:
    """Tokenizes keylang source code into a stream of `Token` objects.

    Usage::

        lexer = Lexer("let five := 5;")
        for token in lexer:
            ...

    or pull tokens one at a time with `next_token()`.
    """

    def __init__(self, source: str, filename: str = "<unknown>", strict: bool = False) -> None:
        if not isinstance(source, str):
            raise TypeError(f"source must be str, not {type(source).__name__}")
        self.source = source
        self.filename = filename
        self.strict = strict
        self.pos = 0
        self.line = 1
        self.column = 1

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def next_token(self) -> Token:
        """Scan and return the next token.

        Once the input is exhausted every call returns an EOF token at
        the same position.
        """
        self._skip_whitespace()

        if self._at_end():
            return self._make_token(TokenKind.EOF, "")

        ch = self._peek()

        if _is_letter(ch):
            return self._scan_identifier()

        if _is_digit(ch):
            return self._scan_number()

        # Two-character operators
        pair = ch + (self._peek_ahead(1) or "")
        if pair in OPERATORS:
            token = self._make_token(OPERATORS[pair], pair)
            self._advance()
            self._advance()
            return token

        if ch in SYMBOLS:
            token = self._make_token(SYMBOLS[ch], ch)
            self._advance()
            return token

        return self._scan_illegal()

    def tokenize(self) -> list[Token]:
        """Tokenize the rest of the source and return the token list."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.EOF:
                return

    # ------------------------------------------------------------------
    # Token scanning
    # ------------------------------------------------------------------

    def _scan_identifier(self) -> Token:
        """Scan an identifier or keyword."""
        start = self.pos
        start_col = self.column

        while not self._at_end() and (_is_letter(self._peek()) or _is_digit(self._peek())):
            self._advance()

        word = self.source[start:self.pos]
        return Token(lookup_ident(word), word, self.line, start_col, self.filename)

    def _scan_number(self) -> Token:
        """Scan an integer literal."""
        start = self.pos
        start_col = self.column

        while not self._at_end() and _is_digit(self._peek()):
            self._advance()

        return Token(TokenKind.INTEGER, self.source[start:self.pos], self.line, start_col, self.filename)

    def _scan_illegal(self) -> Token:
        ch = self._peek()
        if self.strict:
            raise LexerError(
                f"Unexpected character: {ch!r}",
                self.line, self.column, self.filename,
            )

        logger.debug("%s:%d:%d: illegal character %r", self.filename, self.line, self.column, ch)
        token = self._make_token(TokenKind.ILLEGAL, ch)
        self._advance()
        return token

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        """Return the current character without consuming it."""
        return self.source[self.pos]

    def _peek_ahead(self, offset: int) -> str | None:
        """Return a character at an offset ahead, or None if past end."""
        idx = self.pos + offset
        if idx >= len(self.source):
            return None
        return self.source[idx]

    def _advance(self) -> str:
        """Consume and return the current character."""
        ch = self.source[self.pos]
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self._peek() in _WHITESPACE:
            self._advance()

    def _make_token(self, kind: TokenKind, literal: str) -> Token:
        return Token(kind, literal, self.line, self.column, self.filename)


def _is_letter(ch: str) -> bool:
    return ch.isascii() and (ch.isalpha() or ch == "_")


def _is_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


def tokenize(source: str, filename: str = "<unknown>", strict: bool = False) -> list[Token]:
    """Tokenize `source` in one go."""
    return Lexer(source, filename, strict=strict).tokenize()
