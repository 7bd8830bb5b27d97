"""Token categories, data structures, and character classification helpers."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum, auto


class TokenCategory(Enum):
    # Literals
    INTEGER = auto()  # 42
    FLOAT = auto()  # 3.14, 1e9
    STRING = auto()  # "text"
    CHAR = auto()  # 'c'

    # Symbols
    OPERATOR = auto()  # + == :: && ...
    PUNCTUATION = auto()  # , ; ( ) { }

    # Words
    IDENTIFIER = auto()  # name
    KEYWORD = auto()  # int, return, namespace ...
    MEMBER_ACCESS = auto()  # obj.field

    # Whole-line / trailing text
    DIRECTIVE = auto()  # #include <x>
    COMMENT = auto()  # text after //

    UNKNOWN = auto()


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start (inclusive) to end (exclusive)."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single classified lexeme."""

    value: str
    category: TokenCategory
    span: Span


# Characters that always end the pending lexeme and stand alone.
# Underscore and dot are identifier-forming (x_1, obj.field, 3.14).
_SPLIT_PUNCTUATION = frozenset(string.punctuation) - {"_", "."}


def is_split_punct(ch: str) -> bool:
    """Return True if ch is punctuation that forms a one-character lexeme."""
    return ch in _SPLIT_PUNCTUATION


def is_quote(ch: str) -> bool:
    """Return True if ch opens a string or character literal."""
    return ch == '"' or ch == "'"
