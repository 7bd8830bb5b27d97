"""Error types for file access around the lexer pipeline."""

from __future__ import annotations

from pathlib import Path


class LexlightError(Exception):
    """Base class for fatal lexlight errors."""

    def __init__(self, message: str, path: Path, reason: str = "") -> None:
        self.message = message
        self.path = path
        self.reason = reason
        super().__init__(self.format())

    def format(self) -> str:
        result = f"error: {self.message}: {self.path}"
        if self.reason:
            result += f"\n  caused by: {self.reason}"
        return result


class OpenFailure(LexlightError):
    """Raised when the input file cannot be opened for reading."""

    def __init__(self, path: Path, reason: str = "") -> None:
        super().__init__("could not open file", path, reason)


class WriteFailure(LexlightError):
    """Raised when the output file cannot be opened for writing.

    Any bytes already written to *path* are undefined.
    """

    def __init__(self, path: Path, reason: str = "") -> None:
        super().__init__("could not write file", path, reason)
