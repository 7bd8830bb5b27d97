"""Plain token listing — one ``<value, CATEGORY>`` line per token."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from lexlight.tokens import Token


def format_token(token: Token) -> str:
    return f"<{token.value}, {token.category.name}>"


def dump_tokens(tokens: Iterable[Token], *, file: TextIO | None = None) -> None:
    """Print every token to *file* (default: stdout), one per line."""
    out = sys.stdout if file is None else file
    for token in tokens:
        out.write(format_token(token))
        out.write("\n")
