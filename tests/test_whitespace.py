"""Test whitespace and line-comment skipping, and line/column tracking."""

import pytest

from jivelex.errors import LexError
from jivelex.lexer import tokenize
from jivelex.tokens import TokenType, is_whitespace

from .conftest import assert_texts, assert_types, positions


class TestIsWhitespace:
    def test_ascii_whitespace(self):
        for ch in " \t\n\r\v\f":
            assert is_whitespace(ch), f"Expected {ch!r} to be whitespace"

    def test_not_whitespace(self):
        for ch in ["", "a", "/", " "]:
            assert not is_whitespace(ch)


class TestWhitespace:
    def test_whitespace_only(self):
        tokens = tokenize(" \t\r\n\v\f ")
        assert_types(tokens, [TokenType.EOF])

    def test_leading_spaces_shift_column(self, lex):
        tokens = lex("   fn")
        assert positions(tokens) == [(1, 4)]

    def test_tabs_count_as_one_column(self, lex):
        tokens = lex("\t\tx")
        assert positions(tokens) == [(1, 3)]

    def test_newlines_advance_line(self, lex):
        tokens = lex("a\n\n  b")
        assert positions(tokens) == [(1, 1), (3, 3)]

    def test_crlf_line_endings(self, lex):
        tokens = lex("a\r\nb")
        assert positions(tokens) == [(1, 1), (2, 1)]


class TestComments:
    def test_comment_only(self):
        tokens = tokenize("// nothing here")
        assert_types(tokens, [TokenType.EOF])
        assert positions(tokens) == [(1, 16)]

    def test_comment_to_end_of_line(self, lex):
        tokens = lex("// first\nfn")
        assert_types(tokens, [TokenType.KEYWORD])
        assert positions(tokens) == [(2, 1)]

    def test_consecutive_comments(self, lex):
        tokens = lex("// one\n   // two\n\n// three\nx // four")
        assert_texts(tokens, ["x"])
        assert positions(tokens) == [(5, 1)]

    def test_trailing_comment(self, lex):
        tokens = lex("let x int 1 // the answer\nset x 2")
        assert_texts(tokens, ["let", "x", "int", "1", "set", "x", "2"])

    def test_comment_containing_code(self, lex):
        tokens = lex('// fn "unterminated -\nx')
        assert_texts(tokens, ["x"])

    def test_single_slash_is_not_comment(self):
        with pytest.raises(LexError, match="unexpected character '/'"):
            tokenize("/ x")


class TestCharacterAccounting:
    def test_eof_column_covers_every_character(self):
        source = 'fn f () -> int { return "a\\tb" } // done'
        tokens = tokenize(source)
        eof = tokens[-1]
        assert eof.position.offset == len(source)
        assert eof.column == len(source) + 1

    def test_token_offsets_point_at_source(self):
        source = "let x int 42\nset x (call f \"s\")"
        for tok in tokenize(source)[:-1]:
            first = source[tok.position.offset]
            if tok.type == TokenType.STRING:
                assert first == '"'
            else:
                assert first == tok.text[0]
