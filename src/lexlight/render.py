"""HTML renderer — reconstructs indented, colorized source from a token stream."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from lexlight.tokens import Token, TokenCategory

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Token Output"
DEFAULT_INDENT_WIDTH = 4

CATEGORY_COLORS: dict[TokenCategory, str] = {
    TokenCategory.INTEGER: "orange",
    TokenCategory.FLOAT: "pink",
    TokenCategory.STRING: "blue",
    TokenCategory.CHAR: "yellow",
    TokenCategory.OPERATOR: "purple",
    TokenCategory.IDENTIFIER: "darkblue",
    TokenCategory.PUNCTUATION: "black",
    TokenCategory.DIRECTIVE: "teal",
    TokenCategory.KEYWORD: "green",
    TokenCategory.COMMENT: "gray",
    TokenCategory.MEMBER_ACCESS: "darkviolet",
    TokenCategory.UNKNOWN: "red",
}


def color_style(category: TokenCategory) -> str:
    """Return the inline CSS used for characters of the given category."""
    return f"color: {CATEGORY_COLORS[category]};"


# ---------------------------------------------------------------------------
# HTML escaping
# ---------------------------------------------------------------------------


def _escape_html(text: str) -> str:
    """Escape text for HTML body content. Also encodes non-ASCII as entities."""
    result: list[str] = []
    for ch in text:
        if ch == "&":
            result.append("&amp;")
        elif ch == "<":
            result.append("&lt;")
        elif ch == ">":
            result.append("&gt;")
        elif ord(ch) > 0x7F:
            result.append(f"&#x{ord(ch):X};")
        else:
            result.append(ch)
    return "".join(result)


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------


class HtmlRenderer:
    """Feed tokens one at a time; collect the reconstructed <pre> body.

    Layout is driven by token values, not categories: ``{`` and ``}`` open and
    close an indentation level, ``;`` and ``:`` end a line, and a ``"\\n"``
    token forces a visual ``<br>`` break.
    """

    def __init__(
        self,
        title: str = DEFAULT_TITLE,
        indent_width: int = DEFAULT_INDENT_WIDTH,
    ) -> None:
        self.title = title
        self.indent_width = indent_width
        self.depth = 0
        self._line: list[str] = []
        self._body: list[str] = []

    def _indent(self) -> str:
        return " " * (self.depth * self.indent_width)

    def feed(self, token: Token) -> None:
        """Append one token to the current line."""
        value = token.value

        if value == "{":
            self._line.append("{\n")
            self.depth += 1
            self._line.append(self._indent())
            return

        if value == "}":
            self._line.append("\n")
            if self.depth > 0:
                self.depth -= 1
            else:
                logger.warning(
                    "unbalanced '}' at %d:%d, indentation stays at 0",
                    token.span.start.line,
                    token.span.start.column,
                )
            self._line.append(self._indent())
            self._line.append("}\n")
            return

        if value == ";" or value == ":":
            self._line.append(value + "\n")
            self._line.append(self._indent())
            return

        if value == "\n":
            self._body.append("".join(self._line))
            self._body.append("<br>")
            self._line = [self._indent()]
            return

        style = color_style(token.category)
        for ch in value:
            if ch == " ":
                self._line.append("&nbsp;")
            else:
                self._line.append(f'<span style="{style}">{_escape_html(ch)}</span>')
        self._line.append(" ")

    def finish(self) -> str:
        """Flush the pending line and return the rendered body."""
        if self._line:
            self._body.append("".join(self._line))
            self._line = []
        return "".join(self._body)

    def document(self) -> str:
        """Wrap the rendered body in the fixed HTML skeleton."""
        title = _escape_html(self.title)
        parts: list[str] = ["<!DOCTYPE html>\n"]
        parts.append('<html lang="en">\n')
        parts.append("<head>\n")
        parts.append('<meta charset="UTF-8">\n')
        parts.append(f"<title>{title}</title>\n")
        parts.append("</head>\n")
        parts.append("<body>\n")
        parts.append(f"<h1>{title}</h1>\n")
        parts.append("<pre>\n")
        parts.append(self.finish())
        parts.append("</pre>\n")
        parts.append("</body>\n")
        parts.append("</html>")
        return "".join(parts)


def render(
    tokens: Iterable[Token],
    *,
    title: str = DEFAULT_TITLE,
    indent_width: int = DEFAULT_INDENT_WIDTH,
) -> str:
    """Render a token stream to a complete HTML document."""
    renderer = HtmlRenderer(title, indent_width)
    for token in tokens:
        renderer.feed(token)
    return renderer.document()
