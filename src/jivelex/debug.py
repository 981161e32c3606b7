"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from jivelex.tokens import Token


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable token listing to *file*."""
    file.write(f"Tokens ({len(tokens)})\n")
    for tok in tokens:
        _dump_token(tok, file)


def _dump_token(tok: Token, f: TextIO) -> None:
    pos = tok.position
    f.write(f"  {tok.type.name:<10} {tok.text!r}")
    if tok.value is not None:
        f.write(f" = {tok.value}")
    f.write(f" @ {pos.line}:{pos.column} (offset {pos.offset})\n")
