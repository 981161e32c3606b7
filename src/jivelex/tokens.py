"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    # Words
    KEYWORD = "KEYWORD"  # fn let set if while call return true false
    IDENTIFIER = "IDENTIFIER"  # [A-Za-z_][A-Za-z0-9_]*
    TYPE = "TYPE"  # int str bool

    # Structural
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    ARROW = "ARROW"  # ->

    # Literals
    INTEGER = "INTEGER"  # text is the digits, value is the parsed int
    STRING = "STRING"  # text is the decoded content

    EOF = "EOF"

    @property
    def display(self) -> str:
        """Fixed name used in the token report."""
        return self.value


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token with its decoded text and start position."""

    type: TokenType
    filename: str
    position: Position
    text: str
    value: int | None = None

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column


EOF_TEXT = "EOF"

KEYWORDS: dict[str, TokenType] = {
    word: TokenType.KEYWORD
    for word in ("fn", "let", "set", "if", "while", "call", "return", "true", "false")
}

TYPE_NAMES: dict[str, TokenType] = {
    word: TokenType.TYPE for word in ("int", "str", "bool")
}

SYMBOLS: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

# Escapes with a special meaning inside string literals; any other escaped
# character stands for itself.
STRING_ESCAPES: dict[str, str] = {"n": "\n", "t": "\t", '"': '"', "\\": "\\"}

_WHITESPACE = frozenset(" \t\n\r\v\f")
_DIGITS = frozenset("0123456789")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")


def classify_word(text: str) -> TokenType:
    """Return KEYWORD, TYPE, or IDENTIFIER for an identifier-shaped lexeme."""
    return KEYWORDS.get(text) or TYPE_NAMES.get(text) or TokenType.IDENTIFIER


def is_whitespace(ch: str) -> bool:
    """Return True if ch is an ASCII whitespace character."""
    return ch in _WHITESPACE


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch in _DIGITS


def is_ident_start(ch: str) -> bool:
    """Return True if ch can begin an identifier."""
    return ch == "_" or ch in _LETTERS


def is_ident_char(ch: str) -> bool:
    """Return True if ch can continue an identifier."""
    return is_ident_start(ch) or is_digit(ch)
