"""Tests for the LSP server — diagnostic generation."""

from __future__ import annotations

import pytest
from lsprotocol.types import (
    DiagnosticSeverity,
    PublishDiagnosticsParams,
    TextDocumentItem,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import Workspace

from lexlight.lsp import _validate


@pytest.fixture
def lsp_env():
    """Create a LanguageServer with an initialized workspace and captured diagnostics."""
    ls = LanguageServer("test", "v0", text_document_sync_kind=TextDocumentSyncKind.Full)
    ws = Workspace(None)
    ls.protocol._workspace = ws

    published: list[PublishDiagnosticsParams] = []
    ls.text_document_publish_diagnostics = lambda params: published.append(params)

    def put(source: str, uri: str = "file:///test.cpp") -> None:
        ws.put_text_document(
            TextDocumentItem(uri=uri, language_id="cpp", version=0, text=source)
        )

    return ls, published, put


# ---------------------------------------------------------------------------
# Unknown lexemes → Warning severity
# ---------------------------------------------------------------------------


class TestUnknownLexemes:
    def test_unknown_lexeme(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("int 9lives;")
        _validate(ls, "file:///test.cpp")

        assert len(published) == 1
        diags = published[0].diagnostics
        assert len(diags) == 1
        d = diags[0]
        assert d.severity == DiagnosticSeverity.Warning
        assert "9lives" in d.message
        assert d.source == "lexlight"
        # 9lives spans columns 5..11 (1-based) → characters 4..10 (0-based)
        assert d.range.start.line == 0
        assert d.range.start.character == 4
        assert d.range.end.character == 10

    def test_unterminated_string(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put('x = "abc')
        _validate(ls, "file:///test.cpp")

        diags = published[0].diagnostics
        assert len(diags) == 1
        assert '"abc' in diags[0].message

    def test_multiple_unknowns(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("a ? b : c")
        _validate(ls, "file:///test.cpp")

        assert len(published[0].diagnostics) == 2


# ---------------------------------------------------------------------------
# Clean document → empty diagnostics
# ---------------------------------------------------------------------------


class TestCleanDocument:
    def test_valid_document(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("#include <vector>\nint main() {\n    return 0; // ok\n}\n")
        _validate(ls, "file:///test.cpp")

        assert len(published) == 1
        assert published[0].diagnostics == []


# ---------------------------------------------------------------------------
# Position conversion (1-based → 0-based)
# ---------------------------------------------------------------------------


class TestPositionConversion:
    def test_unknown_on_second_line(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("int x;\n$y;")
        _validate(ls, "file:///test.cpp")

        diags = published[0].diagnostics
        assert len(diags) == 1
        d = diags[0]
        assert d.range.start.line == 1
        assert d.range.start.character == 0
