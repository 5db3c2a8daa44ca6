"""MiniLogo lexer — converts source text into a lazy token stream."""

from __future__ import annotations

import math

from minilogo.errors import TokenizeError
from minilogo.log import logger
from minilogo.tokens import KEYWORDS, Token, TokenType, is_ascii_digit, is_hex_digit, is_ident_start

_COLOR_DIGITS = 6


class Lexer:
    """Iterate over the tokens of MiniLogo source text.

    Scanning is lazy: each ``next()`` reads just enough characters for one
    token. The iterator is single-pass. Characters that cannot start a token
    produce an ILLEGAL token and a TokenizeError appended to ``errors``;
    the parser turns the first ILLEGAL token it sees into a raised error.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1
        self.errors: list[TokenizeError] = []

    def __iter__(self) -> Lexer:
        return self

    def __next__(self) -> Token:
        while self._pos < len(self._source):
            ch = self._peek()

            if ch in " \t\r\n":
                self._advance()
                continue

            line, col = self._line, self._col

            if ch == "[":
                self._advance()
                return Token(TokenType.LBRACKET, None, "[", line, col)

            if ch == "]":
                self._advance()
                return Token(TokenType.RBRACKET, None, "]", line, col)

            if ch == "#":
                return self._lex_color(line, col)

            if is_ascii_digit(ch) or (ch == "-" and is_ascii_digit(self._peek(1))):
                return self._lex_number(line, col)

            if is_ident_start(ch):
                return self._lex_identifier(line, col)

            self._advance()
            return self._illegal(ch, f"Unexpected character: {ch}", line, col)

        raise StopIteration

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _illegal(self, raw: str, message: str, line: int, col: int) -> Token:
        self.errors.append(TokenizeError(message, line, self._source, col))
        return Token(TokenType.ILLEGAL, message, raw, line, col)

    # ------------------------------------------------------------------
    # Token scanners
    # ------------------------------------------------------------------

    def _lex_color(self, line: int, col: int) -> Token:
        chars = [self._advance()]  # consume '#'
        # Fewer than six digits is accepted as-is
        for _ in range(_COLOR_DIGITS):
            if not is_hex_digit(self._peek()):
                break
            chars.append(self._advance())
        text = "".join(chars)
        return Token(TokenType.COLOR, text, text, line, col)

    def _lex_number(self, line: int, col: int) -> Token:
        chars = [self._advance()]  # first digit, or a minus sign directly before one
        while self._peek().isnumeric():
            chars.append(self._advance())
        # A dot belongs to the number only when a digit follows it
        if self._peek() == "." and self._peek(1).isnumeric():
            chars.append(self._advance())
            while self._peek().isnumeric():
                chars.append(self._advance())
        text = "".join(chars)
        try:
            value = float(text)
        except ValueError:
            return self._illegal(text, "Expected number but could not parse it.", line, col)
        if not math.isfinite(value):
            return self._illegal(text, "Number is too large.", line, col)
        return Token(TokenType.NUMBER, value, text, line, col)

    def _lex_identifier(self, line: int, col: int) -> Token:
        chars = [self._advance()]
        while self._peek().isalnum():
            chars.append(self._advance())
        text = "".join(chars)
        tt = KEYWORDS.get(text.lower())
        if tt is None:
            return self._illegal(
                text,
                f"Token `{text}` does not match any keyword. Identifier must be a keyword "
                "(functions, classes, and variables are not supported).",
                line,
                col,
            )
        return Token(tt, None, text, line, col)


def tokenize(source: str) -> list[Token]:
    """Convenience function: scan the whole source and return the token list."""
    tokens = list(Lexer(source))
    logger.debug("tokenized %d tokens", len(tokens))
    return tokens
