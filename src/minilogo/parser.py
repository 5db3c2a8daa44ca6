"""MiniLogo parser — converts a token stream into a list of statements."""

from __future__ import annotations

import math
from collections.abc import Iterable

from minilogo.ast import (
    Block,
    Expression,
    Literal,
    MoveBackward,
    MoveForward,
    Repeat,
    RotateLeft,
    RotateRight,
    SetColor,
    Stmt,
)
from minilogo.errors import ParseError, TokenizeError
from minilogo.lexer import Lexer
from minilogo.log import logger
from minilogo.tokens import Token, TokenType

# Command token -> (statement class, name used in the error message)
_COMMANDS: dict[TokenType, tuple[type, str]] = {
    TokenType.FORWARD: (MoveForward, "forward"),
    TokenType.BACKWARD: (MoveBackward, "back"),
    TokenType.TURN_RIGHT: (RotateRight, "turn right"),
    TokenType.TURN_LEFT: (RotateLeft, "turn left"),
}

_MISSING_OPEN_BRACKET = (
    "Expected block. Block has to start with opening bracket `[`. Opening bracket is missing."
)
_MISSING_CLOSE_BRACKET = (
    "Expected block. Block has to end with closing bracket `]`. Closing bracket is missing."
)
_EXCESS_CLOSE_BRACKET = (
    "Invalid number of closing brackets. There are more closing brackets than expected."
)
_TOO_DEEP = "Blocks are nested too deeply."

# Bounds Evaluator recursion as well as the parser's own
MAX_NESTING = 100


class Parser:
    """Recursive descent parser over a MiniLogo token stream.

    Reads one token of lookahead at a time, so a Lexer can be passed in
    directly. The first error aborts the parse; nothing partial is returned.
    """

    def __init__(self, tokens: Iterable[Token], source: str = "") -> None:
        self._tokens = iter(tokens)
        self._source = source
        self._lookahead: Token | None = None
        # Line reported for errors once the stream is exhausted
        self._last_line = 1
        self._depth = 0

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _fill(self) -> None:
        tok = next(self._tokens, None)
        if tok is not None and tok.type == TokenType.ILLEGAL:
            raise TokenizeError(str(tok.value), tok.line, self._source, tok.column)
        self._lookahead = tok

    def _at(self, *types: TokenType) -> bool:
        return self._lookahead is not None and self._lookahead.type in types

    def _at_end(self) -> bool:
        return self._lookahead is None

    def _advance(self) -> Token:
        tok = self._lookahead
        assert tok is not None
        self._last_line = tok.line
        self._fill()
        return tok

    def _expect(self, tt: TokenType, message: str) -> Token:
        if not self._at(tt):
            raise self._error(message)
        return self._advance()

    def _error(self, message: str) -> ParseError:
        tok = self._lookahead
        if tok is None:
            return ParseError(message, self._last_line, self._source)
        return ParseError(message, tok.line, self._source, tok.column)

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def parse(self) -> list[Stmt]:
        self._fill()
        statements: list[Stmt] = []
        while not self._at_end():
            statements.append(self._parse_statement())
        return statements

    def _parse_statement(self) -> Stmt:
        tok = self._lookahead
        assert tok is not None

        if tok.type == TokenType.REPEAT:
            return self._parse_repeat()

        if tok.type == TokenType.SET_COLOR:
            self._advance()
            color = self._expect(TokenType.COLOR, "Expecting HEX color after COLOR command.")
            return SetColor(str(color.value), tok.line)

        if tok.type in _COMMANDS:
            node_cls, name = _COMMANDS[tok.type]
            self._advance()
            number = self._expect(TokenType.NUMBER, f"Expecting number after {name} command.")
            return node_cls(number.value, tok.line)

        if tok.type == TokenType.LBRACKET:
            return self._parse_block()

        if tok.type == TokenType.RBRACKET:
            raise self._error(_EXCESS_CLOSE_BRACKET)

        return self._parse_expression_stmt()

    def _parse_repeat(self) -> Repeat:
        start = self._advance()  # consume REPEAT
        number = self._expect(
            TokenType.NUMBER,
            "Repeat statement must define a number of repeats. Parser didn't find number.",
        )
        body = self._parse_block()
        return Repeat(repeat_count(number.value), body, start.line)

    def _parse_block(self) -> Block:
        start = self._expect(TokenType.LBRACKET, _MISSING_OPEN_BRACKET)
        if self._depth >= MAX_NESTING:
            raise ParseError(_TOO_DEEP, start.line, self._source, start.column)

        self._depth += 1
        body: list[Stmt] = []
        while not self._at(TokenType.RBRACKET):
            if self._at_end():
                raise self._error(_MISSING_CLOSE_BRACKET)
            body.append(self._parse_statement())
        self._advance()  # consume ']'
        self._depth -= 1
        return Block(tuple(body), start.line)

    def _parse_expression_stmt(self) -> Expression:
        tok = self._lookahead
        assert tok is not None
        if tok.type in (TokenType.NUMBER, TokenType.COLOR):
            self._advance()
            return Expression(Literal(tok.value, tok.line), tok.line)
        raise self._error("Expected an expression while parsing primary.")


def repeat_count(value: float) -> int:
    """Round half away from zero; negative counts run zero times."""
    if not math.isfinite(value):
        raise ValueError(f"repeat count must be finite, got {value}")
    if value <= 0:
        return 0
    return int(math.floor(value + 0.5))


def parse(source: str) -> list[Stmt]:
    """Convenience function: parse source text and return its statements."""
    statements = Parser(Lexer(source), source).parse()
    logger.debug("parsed %d top-level statements", len(statements))
    return statements
