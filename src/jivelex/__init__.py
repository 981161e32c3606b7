"""Lexical analyzer for the jive language."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from jivelex.tokens import Token

__version__ = "0.1.0"


def lex_file(path: Path | str) -> list[Token]:
    """Read a jive source file and return its token stream."""
    from jivelex.lexer import tokenize
    from jivelex.source import read_source

    return tokenize(read_source(path), str(path))
