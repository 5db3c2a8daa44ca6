"""Minimal LSP server for MiniLogo — diagnostics only."""

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

from minilogo import __version__
from minilogo.errors import LogoError
from minilogo.parser import parse

server = LanguageServer(
    "minilogo-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _diagnostic(exc: LogoError, source: str) -> Diagnostic:
    line = max(0, exc.line - 1)
    col = max(0, exc.column - 1)
    lines = source.splitlines()
    # Underline the rest of the offending token when the line is known
    end_col = col + 1
    if line < len(lines):
        text = lines[line]
        end_col = col
        while end_col < len(text) and not text[end_col].isspace():
            end_col += 1
        end_col = max(end_col, col + 1)
    return Diagnostic(
        range=Range(
            start=Position(line=line, character=col),
            end=Position(line=line, character=end_col),
        ),
        message=exc.summary(),
        severity=DiagnosticSeverity.Error,
        source="minilogo",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Lex and parse the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    diagnostics: list[Diagnostic] = []

    try:
        parse(source)
    except LogoError as exc:
        diagnostics.append(_diagnostic(exc, source))

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
