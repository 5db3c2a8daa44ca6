"""Token types, the keyword table, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Structural
    LBRACKET = auto()  # [
    RBRACKET = auto()  # ]

    # Literals
    NUMBER = auto()  # 10, 55.5
    COLOR = auto()  # #rrggbb (0-6 hex digits)

    # Commands
    SET_COLOR = auto()  # COLOR
    FORWARD = auto()  # FORWARD, FD
    BACKWARD = auto()  # BACK, BK
    TURN_RIGHT = auto()  # RIGHT, RT
    TURN_LEFT = auto()  # LEFT, LT

    REPEAT = auto()

    # Unrecognized input — value carries the diagnostic message
    ILLEGAL = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token with its value, original source text and position."""

    type: TokenType
    value: float | str | None
    raw: str
    line: int
    column: int = 1

    @property
    def lexeme(self) -> str:
        """Canonical display text for the token."""
        return _LEXEMES.get(self.type, self.raw)


# Lower-cased identifier -> command token type
KEYWORDS: dict[str, TokenType] = {
    "repeat": TokenType.REPEAT,
    "color": TokenType.SET_COLOR,
    "forward": TokenType.FORWARD,
    "fd": TokenType.FORWARD,
    "back": TokenType.BACKWARD,
    "bk": TokenType.BACKWARD,
    "left": TokenType.TURN_LEFT,
    "lt": TokenType.TURN_LEFT,
    "right": TokenType.TURN_RIGHT,
    "rt": TokenType.TURN_RIGHT,
}

_LEXEMES: dict[TokenType, str] = {
    TokenType.LBRACKET: "[",
    TokenType.RBRACKET: "]",
    TokenType.SET_COLOR: "COLOR",
    TokenType.FORWARD: "FD",
    TokenType.BACKWARD: "BK",
    TokenType.TURN_RIGHT: "RT",
    TokenType.TURN_LEFT: "LT",
    TokenType.REPEAT: "REPEAT",
}


def is_ascii_digit(ch: str) -> bool:
    """Return True if ch may start a number."""
    return "0" <= ch <= "9"


def is_ident_start(ch: str) -> bool:
    """Return True if ch may start an identifier (ASCII letter or underscore)."""
    return (ch.isascii() and ch.isalpha()) or ch == "_"


def is_hex_digit(ch: str) -> bool:
    """Return True if ch is a hexadecimal digit."""
    return ch != "" and ch in "0123456789abcdefABCDEF"
