"""Jive lexer — converts source text into a flat token stream."""

from __future__ import annotations

from jivelex.cursor import Cursor
from jivelex.errors import LexError
from jivelex.tokens import (
    EOF_TEXT,
    STRING_ESCAPES,
    SYMBOLS,
    Position,
    Token,
    TokenType,
    classify_word,
    is_digit,
    is_ident_char,
    is_ident_start,
    is_whitespace,
)


class Lexer:
    """Tokenize jive source text into a stream of Token objects."""

    def __init__(self, source: str, filename: str = "input.jive") -> None:
        self._source = source
        self._filename = filename
        self._cursor = Cursor(source)

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list, ending with EOF."""
        tokens: list[Token] = []
        while True:
            tok = self.next_token()
            tokens.append(tok)
            if tok.type is TokenType.EOF:
                return tokens

    def next_token(self) -> Token:
        """Scan and return the next token, leaving the cursor just past it."""
        self._skip_ws_and_comments()

        cur = self._cursor
        start = cur.position()

        if cur.at_end():
            return self._make(TokenType.EOF, EOF_TEXT, start)

        ch = cur.peek()

        if ch in SYMBOLS:
            cur.advance()
            return self._make(SYMBOLS[ch], ch, start)

        if ch == "-" and cur.peek_next() == ">":
            cur.advance()
            cur.advance()
            return self._make(TokenType.ARROW, "->", start)

        if is_digit(ch):
            return self._lex_integer(start)

        if is_ident_start(ch):
            return self._lex_word(start)

        if ch == '"':
            return self._lex_string(start)

        raise self._error(f"unexpected character '{ch}'", start)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _make(
        self, tt: TokenType, text: str, start: Position, value: int | None = None
    ) -> Token:
        return Token(tt, self._filename, start, text, value)

    def _error(self, message: str, pos: Position) -> LexError:
        return LexError(message, pos, self._source, self._filename)

    def _skip_ws_and_comments(self) -> None:
        cur = self._cursor
        while True:
            while is_whitespace(cur.peek()):
                cur.advance()
            if cur.peek() == "/" and cur.peek_next() == "/":
                while not cur.at_end() and cur.peek() != "\n":
                    cur.advance()
                continue
            return

    # ------------------------------------------------------------------
    # Literals and words
    # ------------------------------------------------------------------

    def _lex_integer(self, start: Position) -> Token:
        cur = self._cursor
        while is_digit(cur.peek()):
            cur.advance()
        text = cur.slice_from(start)
        return self._make(TokenType.INTEGER, text, start, int(text, 10))

    def _lex_word(self, start: Position) -> Token:
        cur = self._cursor
        cur.advance()
        while is_ident_char(cur.peek()):
            cur.advance()
        text = cur.slice_from(start)
        return self._make(classify_word(text), text, start)

    def _lex_string(self, start: Position) -> Token:
        cur = self._cursor
        cur.advance()  # opening quote
        chars: list[str] = []

        while not cur.at_end():
            ch = cur.advance()
            if ch == '"':
                return self._make(TokenType.STRING, "".join(chars), start)
            if ch == "\\":
                if cur.at_end():
                    break
                esc = cur.advance()
                chars.append(STRING_ESCAPES.get(esc, esc))
            else:
                chars.append(ch)

        raise self._error("unterminated string literal", start)


def tokenize(source: str, filename: str = "input.jive") -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source, filename).tokenize()
