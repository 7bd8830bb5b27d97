"""lexlight: lexical token listing and HTML highlighting for C-like source."""

from __future__ import annotations

__version__ = "0.1.0"


def highlight(
    source: str,
    filename: str = "file.txt",
    *,
    title: str | None = None,
    indent_width: int | None = None,
) -> str:
    """Tokenize source text and render it to an HTML document."""
    from lexlight.lexer import tokenize
    from lexlight.render import DEFAULT_INDENT_WIDTH, DEFAULT_TITLE, render

    tokens = tokenize(source, filename)
    return render(
        tokens,
        title=DEFAULT_TITLE if title is None else title,
        indent_width=DEFAULT_INDENT_WIDTH if indent_width is None else indent_width,
    )
