"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from lexlight.lexer import tokenize
from lexlight.tokens import Position, Span, Token, TokenCategory

S = Span(Position(1, 1, 0), Position(1, 1, 0))


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns the token list."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source, "test.txt")

    return _lex


def tok(value: str, category: TokenCategory = TokenCategory.IDENTIFIER) -> Token:
    """Build a token with a dummy span, for renderer and listing tests."""
    return Token(value, category, S)


def assert_categories(tokens: list[Token], expected: list[TokenCategory]) -> None:
    """Assert that the token categories match the expected list."""
    actual = [t.category for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def pairs(tokens: list[Token]) -> list[tuple[str, TokenCategory]]:
    """Return (value, category) pairs, ignoring spans."""
    return [(t.value, t.category) for t in tokens]
