"""Error types with formatted source context."""

from __future__ import annotations


class LogoError(Exception):
    """Base for terminal MiniLogo errors, carrying a line and source context."""

    kind = "Interpreter"

    def __init__(self, message: str, line: int, source: str = "", column: int = 1) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.source = source
        super().__init__(self.format())

    def summary(self) -> str:
        """Single-line description: error kind, line number and message."""
        return f"{self.kind} Error at line {self.line}: {self.message}"

    def format(self, filename: str = "input.logo") -> str:
        lines = self.source.splitlines()
        line_idx = self.line - 1
        col = max(1, self.column)

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\r")
        else:
            source_line = ""

        line_num = str(self.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        result = f"error: {self.summary()}\n{' ' * gutter_width}--> {filename}:{self.line}:{col}"
        if source_line:
            pad = " " * (col - 1)
            result += f"\n{blank_gutter}\n{line_gutter} {source_line}\n{blank_gutter} {pad}^"
        return result


class TokenizeError(LogoError):
    """Unrecognized character, malformed number, or unknown identifier."""

    kind = "Tokenizer"


class ParseError(LogoError):
    """Missing expected token, unbalanced brackets, or unknown statement start."""

    kind = "Parser"
