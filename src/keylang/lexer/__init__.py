"""keylang lexer — pull-based tokenizer for the keylang toy language."""

from keylang.lexer.tokens import KEYWORDS, Token, TokenKind, lookup_ident
from keylang.lexer.lexer import Lexer, LexerError, tokenize

__all__ = ["KEYWORDS", "Token", "TokenKind", "Lexer", "LexerError", "lookup_ident", "tokenize"]
