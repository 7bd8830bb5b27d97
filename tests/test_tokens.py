"""Test the token model and character classification helpers."""

import dataclasses

import pytest

from lexlight.tokens import TokenCategory, is_quote, is_split_punct

from .conftest import tok


class TestTokenCategory:
    def test_twelve_categories(self):
        assert len(TokenCategory) == 12

    def test_canonical_names(self):
        assert TokenCategory.MEMBER_ACCESS.name == "MEMBER_ACCESS"
        assert TokenCategory.UNKNOWN.name == "UNKNOWN"


class TestToken:
    def test_frozen(self):
        t = tok("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            t.value = "y"

    def test_equality_by_value(self):
        assert tok("x") == tok("x")
        assert tok("x") != tok("x", TokenCategory.UNKNOWN)


class TestSplitPunct:
    @pytest.mark.parametrize("ch", list(",;(){}<>+-*/=!&|%[]:?~^@$\\`"))
    def test_splits(self, ch):
        assert is_split_punct(ch)

    @pytest.mark.parametrize("ch", ["_", ".", "a", "0", " ", "é"])
    def test_does_not_split(self, ch):
        assert not is_split_punct(ch)


class TestQuote:
    def test_quotes(self):
        assert is_quote('"')
        assert is_quote("'")
        assert not is_quote("`")
