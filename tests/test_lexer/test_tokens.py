"""Tests for token kinds, lookup tables and the Token value type."""

import dataclasses

import pytest

from keylang.lexer.tokens import KEYWORDS, OPERATORS, SYMBOLS, Token, TokenKind, lookup_ident


class TestKeywordTable:
    def test_reserved_words(self):
        assert dict(KEYWORDS) == {
            "fn": TokenKind.FUNCTION,
            "let": TokenKind.LET,
            "true": TokenKind.TRUE,
            "false": TokenKind.FALSE,
            "return": TokenKind.RETURN,
            "returns": TokenKind.RETURNS,
            "key": TokenKind.KEY,
            "lock": TokenKind.LOCK,
        }

    @pytest.mark.parametrize("table", [KEYWORDS, OPERATORS, SYMBOLS])
    def test_tables_are_read_only(self, table):
        with pytest.raises(TypeError):
            table["if"] = TokenKind.IDENTIFIER

    def test_lookup_keyword(self):
        assert lookup_ident("returns") is TokenKind.RETURNS

    @pytest.mark.parametrize("word", ["if", "else", "Fn", "lets", "ke"])
    def test_lookup_plain_identifier(self, word):
        assert lookup_ident(word) is TokenKind.IDENTIFIER

    def test_symbol_tables_do_not_overlap(self):
        assert not set(OPERATORS) & set(SYMBOLS)
        assert all(len(op) == 2 for op in OPERATORS)
        assert all(len(sym) == 1 for sym in SYMBOLS)


class TestToken:
    def test_frozen(self):
        tok = Token(TokenKind.IDENTIFIER, "x", 1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            tok.literal = "y"

    def test_default_file(self):
        assert Token(TokenKind.EOF, "", 1, 1).file == "<unknown>"

    def test_is_keyword(self):
        assert Token(TokenKind.LOCK, "lock", 1, 1).is_keyword
        assert not Token(TokenKind.IDENTIFIER, "locks", 1, 1).is_keyword
        assert not Token(TokenKind.PLUS, "+", 1, 1).is_keyword

    def test_repr(self):
        assert repr(Token(TokenKind.INTEGER, "42", 3, 7)) == "Token(INTEGER, '42', 3:7)"

    def test_repr_eof(self):
        assert repr(Token(TokenKind.EOF, "", 2, 1)) == "Token(EOF, 2:1)"

    def test_equality_by_value(self):
        assert Token(TokenKind.MINUS, "-", 1, 2) == Token(TokenKind.MINUS, "-", 1, 2)
        assert Token(TokenKind.MINUS, "-", 1, 2) != Token(TokenKind.MINUS, "-", 1, 3)
