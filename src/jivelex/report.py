"""Token stream reports: tab-separated text and JSON."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from jivelex.tokens import Token, TokenType


def format_token(tok: Token) -> str:
    """Render one token as ``file:line:column<TAB>KIND[<TAB>payload]``."""
    head = f"{tok.filename}:{tok.line}:{tok.column}\t{tok.type.display}"
    if tok.type is TokenType.EOF:
        return head
    if tok.type is TokenType.INTEGER:
        return f"{head}\t{tok.value}"
    return f"{head}\t{tok.text}"


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render a token stream, one newline-terminated line per token."""
    return "".join(format_token(tok) + "\n" for tok in tokens)


def token_to_dict(tok: Token) -> dict[str, Any]:
    d: dict[str, Any] = {
        "type": tok.type.display,
        "file": tok.filename,
        "line": tok.line,
        "column": tok.column,
        "text": tok.text,
    }
    if tok.value is not None:
        d["value"] = tok.value
    return d


def format_tokens_json(tokens: Iterable[Token]) -> str:
    """Render a token stream as a JSON array."""
    return json.dumps([token_to_dict(tok) for tok in tokens], indent=2) + "\n"


FORMATTERS = {
    "text": format_tokens,
    "json": format_tokens_json,
}
