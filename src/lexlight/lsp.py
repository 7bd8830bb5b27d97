"""Minimal LSP server for lexlight — unknown-lexeme diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from lexlight import __version__
from lexlight.lexer import tokenize
from lexlight.tokens import Token, TokenCategory

server = LanguageServer(
    "lexlight-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _diagnostic(token: Token) -> Diagnostic:
    start = token.span.start
    end = token.span.end
    return Diagnostic(
        range=Range(
            start=Position(line=start.line - 1, character=start.column - 1),
            end=Position(line=end.line - 1, character=end.column - 1),
        ),
        message=f"unrecognized lexeme {token.value!r}",
        severity=DiagnosticSeverity.Warning,
        source="lexlight",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Tokenize the document and publish a warning per UNKNOWN lexeme."""
    doc = ls.workspace.get_text_document(uri)
    filename = uri.rsplit("/", 1)[-1] if "/" in uri else uri

    diagnostics = [
        _diagnostic(tok)
        for tok in tokenize(doc.source, filename)
        if tok.category == TokenCategory.UNKNOWN
    ]

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
