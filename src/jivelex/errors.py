"""Error types with formatted source context."""

from __future__ import annotations

from jivelex.tokens import Position


class JiveError(Exception):
    """Base class for errors reported by jivelex."""

    message: str

    def diagnostic(self) -> str:
        """One-line report for stderr."""
        return str(self)


class SourceError(JiveError):
    """Raised when the source file cannot be loaded."""

    def __init__(self, message: str, filename: str) -> None:
        self.message = message
        self.filename = filename
        super().__init__(self.diagnostic())

    def diagnostic(self) -> str:
        # Nothing has been scanned yet, so report the start of the file.
        return f"{self.filename}:1:1: {self.message}"


class LexError(JiveError):
    """Raised on the first lexing error, with position and source context."""

    def __init__(
        self,
        message: str,
        position: Position,
        source: str,
        filename: str = "input.jive",
    ) -> None:
        self.message = message
        self.position = position
        self.source = source
        self.filename = filename
        super().__init__(self.diagnostic())

    def diagnostic(self) -> str:
        return f"{self.filename}:{self.position.line}:{self.position.column}: {self.message}"

    def format(self, filename: str | None = None) -> str:
        if filename is None:
            filename = self.filename
        lines = self.source.splitlines(keepends=True)
        line_idx = self.position.line - 1
        col = self.position.column

        # Build the source line (strip trailing newline for display)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )
