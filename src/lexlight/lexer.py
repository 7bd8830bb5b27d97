"""lexlight lexer — converts source text into a flat, classified token stream."""

from __future__ import annotations

import logging
import re
from enum import Enum, auto

from lexlight.classify import classify
from lexlight.tokens import Position, Span, Token, TokenCategory, is_quote, is_split_punct

logger = logging.getLogger(__name__)

# A numeric lexeme waiting for the sign of its exponent: "1e", "3.14E", ".5e"
_EXPONENT_PREFIX = re.compile(r"[0-9]*\.?[0-9]+[eE]")


class _State(Enum):
    NORMAL = auto()
    STRING = auto()
    CHAR = auto()
    DIRECTIVE = auto()


_CLOSING = {_State.STRING: '"', _State.CHAR: "'"}


class Lexer:
    """Tokenize source text into a list of classified Token objects."""

    def __init__(self, source: str, filename: str = "file.txt") -> None:
        self._source = source
        self._filename = filename
        self._pos = 0
        self._line = 1
        self._col = 1
        self._tokens: list[Token] = []
        self._state = _State.NORMAL
        self._buffer: list[str] = []
        self._start: Position | None = None

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list."""
        while self._pos < len(self._source):
            if self._state == _State.NORMAL:
                self._lex_normal()
            elif self._state == _State.DIRECTIVE:
                self._lex_directive()
            else:
                self._lex_literal()

        if self._state != _State.NORMAL:
            logger.debug(
                "%s: end of input inside %s, flushing %r as-is",
                self._filename,
                self._state.name.lower(),
                "".join(self._buffer),
            )
            self._state = _State.NORMAL
        self._flush()
        return self._tokens

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    # ------------------------------------------------------------------
    # Lexeme buffer
    # ------------------------------------------------------------------

    def _append(self) -> None:
        """Move the current character into the pending lexeme."""
        if not self._buffer:
            self._start = self._current_pos()
        self._buffer.append(self._advance())

    def _flush(self) -> None:
        """Classify and emit the pending lexeme, if any."""
        if not self._buffer:
            return
        assert self._start is not None
        self._emit("".join(self._buffer), self._start)
        self._buffer.clear()
        self._start = None

    def _emit(self, value: str, start: Position, category: TokenCategory | None = None) -> Token:
        if category is None:
            category = classify(value)
        tok = Token(value, category, Span(start, self._current_pos()))
        self._tokens.append(tok)
        return tok

    # ------------------------------------------------------------------
    # Normal mode
    # ------------------------------------------------------------------

    def _lex_normal(self) -> None:
        ch = self._peek()

        if ch == "#":
            self._flush()
            self._append()
            self._state = _State.DIRECTIVE
            return

        if is_quote(ch):
            self._flush()
            self._append()
            self._state = _State.STRING if ch == '"' else _State.CHAR
            return

        if ch == "/" and self._peek(1) == "/":
            self._lex_comment()
            return

        if ch == ":" and self._peek(1) == ":":
            self._flush()
            start = self._current_pos()
            self._advance()
            self._advance()
            self._emit("::", start)
            return

        if ch.isspace():
            self._flush()
            self._advance()
            return

        if ch in "+-" and _EXPONENT_PREFIX.fullmatch("".join(self._buffer)):
            self._append()
            return

        if is_split_punct(ch):
            self._flush()
            start = self._current_pos()
            self._advance()
            self._emit(ch, start)
            return

        self._append()

    def _lex_comment(self) -> None:
        """Consume // up to (not including) the newline; emit the text after //."""
        self._flush()
        start = self._current_pos()
        self._advance()
        self._advance()
        chars = []
        while self._pos < len(self._source) and self._peek() != "\n":
            chars.append(self._advance())
        if chars:
            self._emit("".join(chars), start, TokenCategory.COMMENT)

    # ------------------------------------------------------------------
    # String / char literal mode
    # ------------------------------------------------------------------

    def _lex_literal(self) -> None:
        # No escape handling: the first matching quote closes the literal.
        closing = _CLOSING[self._state]
        ch = self._peek()
        self._append()
        if ch == closing:
            self._state = _State.NORMAL
            self._flush()

    # ------------------------------------------------------------------
    # Directive mode
    # ------------------------------------------------------------------

    def _lex_directive(self) -> None:
        ch = self._peek()
        if ch == "\n" or (ch == "\r" and self._peek(1) == "\n"):
            self._flush()
            self._state = _State.NORMAL
            self._advance()
            return
        self._append()


def tokenize(source: str, filename: str = "file.txt") -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source, filename).tokenize()
