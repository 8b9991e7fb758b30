"""Token kinds, lookup tables and the Token dataclass for the keylang lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping


class TokenKind(Enum):
    """Every distinct token the keylang lexer can produce."""

    # Special
    ILLEGAL = auto()
    EOF = auto()

    # Identifiers & literals
    IDENTIFIER = auto()
    INTEGER = auto()

    # Operators
    ASSIGN = auto()         # :=
    PLUS = auto()
    MINUS = auto()
    BANG = auto()
    STAR = auto()
    SLASH = auto()

    # Comparison
    LESS_THAN = auto()
    GREATER_THAN = auto()
    EQUAL = auto()          # =
    NOT_EQUAL = auto()      # !=

    # Delimiters
    COMMA = auto()
    SEMICOLON = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()
    LBRACKET = auto()
    RBRACKET = auto()

    # Keywords
    FUNCTION = auto()
    LET = auto()
    TRUE = auto()
    FALSE = auto()
    RETURN = auto()
    RETURNS = auto()
    KEY = auto()
    LOCK = auto()


# Map keyword strings to token kinds
KEYWORDS: Mapping[str, TokenKind] = MappingProxyType({
    "fn": TokenKind.FUNCTION,
    "let": TokenKind.LET,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "return": TokenKind.RETURN,
    "returns": TokenKind.RETURNS,
    "key": TokenKind.KEY,
    "lock": TokenKind.LOCK,
})

# Two-character operators, matched before SYMBOLS
OPERATORS: Mapping[str, TokenKind] = MappingProxyType({
    ":=": TokenKind.ASSIGN,
    "!=": TokenKind.NOT_EQUAL,
})

SYMBOLS: Mapping[str, TokenKind] = MappingProxyType({
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "!": TokenKind.BANG,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "<": TokenKind.LESS_THAN,
    ">": TokenKind.GREATER_THAN,
    "=": TokenKind.EQUAL,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
})

_KEYWORD_KINDS = frozenset(KEYWORDS.values())


def lookup_ident(word: str) -> TokenKind:
    """Return the keyword kind for `word`, or IDENTIFIER if it is not reserved."""
    return KEYWORDS.get(word, TokenKind.IDENTIFIER)


@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the lexer.

    `literal` is the exact slice of source the token was scanned from
    (empty for EOF). `line` and `column` are 1-based and point at the
    token's first character.
    """

    kind: TokenKind
    literal: str
    line: int
    column: int
    file: str = "<unknown>"

    @property
    def is_keyword(self) -> bool:
        return self.kind in _KEYWORD_KINDS

    def __repr__(self) -> str:
        if self.kind is TokenKind.EOF:
            return f"Token({self.kind.name}, {self.line}:{self.column})"
        return f"Token({self.kind.name}, {self.literal!r}, {self.line}:{self.column})"
