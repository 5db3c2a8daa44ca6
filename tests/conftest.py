"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from minilogo.ast import Stmt
from minilogo.effects import DrawLine, Effect
from minilogo.eval import run
from minilogo.lexer import tokenize
from minilogo.parser import parse
from minilogo.tokens import Token, TokenType
from minilogo.turtle import Surface


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns the token list."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source)

    return _lex


@pytest.fixture
def parse_source():
    """Return a helper that parses source and returns its statements."""

    def _parse(source: str) -> list[Stmt]:
        return parse(source)

    return _parse


@pytest.fixture
def run_source():
    """Return a helper that runs source on a 200x200 surface (turtle at 100, 100)."""

    def _run(source: str) -> list[Effect]:
        return run(source, Surface(200.0, 200.0))

    return _run


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def lines(effects: list[Effect]) -> list[DrawLine]:
    """Return only the DrawLine effects."""
    return [e for e in effects if isinstance(e, DrawLine)]
