"""Loading jive source files."""

from __future__ import annotations

from pathlib import Path

from jivelex.errors import SourceError


def read_source(path: Path | str) -> str:
    """Return the full UTF-8 text of *path*, or raise SourceError."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise SourceError(f"cannot open file: {path}", str(path)) from exc
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SourceError(f"cannot decode file as UTF-8: {path}", str(path)) from exc
