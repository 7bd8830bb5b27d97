"""Lexeme classification — ordered rules mapping lexeme text to a category."""

from __future__ import annotations

import re
from collections.abc import Callable

from lexlight.tokens import TokenCategory

# "long long" never matches: the lexer does not produce lexemes with spaces.
KEYWORDS = frozenset(
    {
        "int",
        "float",
        "double",
        "char",
        "if",
        "else",
        "for",
        "while",
        "return",
        "void",
        "using",
        "namespace",
        "const",
        "long long",
    }
)

DIRECTIVE_NAMES = ("include", "define", "ifdef", "ifndef", "endif", "pragma")

OPERATORS = frozenset("+ - * / = == != > < >= % [ ] <= && ! & || ::".split())

PUNCTUATION = frozenset(",;(){}<>")

_IDENT = r"[a-zA-Z_][a-zA-Z0-9_]*"

_DIRECTIVE_RE = re.compile(r"#(" + "|".join(DIRECTIVE_NAMES) + r")[ \t]+([^ \t]+).*")
_INTEGER_RE = re.compile(r"[0-9]+")
_FLOAT_RE = re.compile(r"[0-9]*\.[0-9]+([eE][+-]?[0-9]+)?|[0-9]+([eE][+-]?[0-9]+)?")
_STRING_RE = re.compile(r'".*"', re.DOTALL)
_CHAR_RE = re.compile(r"'.'", re.DOTALL)
_MEMBER_ACCESS_RE = re.compile(_IDENT + r"\." + _IDENT)
_IDENTIFIER_RE = re.compile(_IDENT)


def _matches(pattern: re.Pattern[str]) -> Callable[[str], bool]:
    def check(lexeme: str) -> bool:
        return pattern.fullmatch(lexeme) is not None

    return check


# First match wins. Order matters: keywords shadow identifiers, integers
# shadow the exponent-less float alternative, operators shadow < and >.
_RULES: tuple[tuple[TokenCategory, Callable[[str], bool]], ...] = (
    (TokenCategory.KEYWORD, KEYWORDS.__contains__),
    (TokenCategory.DIRECTIVE, _matches(_DIRECTIVE_RE)),
    (TokenCategory.INTEGER, _matches(_INTEGER_RE)),
    (TokenCategory.FLOAT, _matches(_FLOAT_RE)),
    (TokenCategory.STRING, _matches(_STRING_RE)),
    (TokenCategory.CHAR, _matches(_CHAR_RE)),
    (TokenCategory.MEMBER_ACCESS, _matches(_MEMBER_ACCESS_RE)),
    (TokenCategory.OPERATOR, OPERATORS.__contains__),
    (TokenCategory.IDENTIFIER, _matches(_IDENTIFIER_RE)),
    (TokenCategory.PUNCTUATION, PUNCTUATION.__contains__),
)


def classify(lexeme: str) -> TokenCategory:
    """Return the category of a delimited lexeme. Never fails."""
    for category, matches in _RULES:
        if matches(lexeme):
            return category
    return TokenCategory.UNKNOWN
