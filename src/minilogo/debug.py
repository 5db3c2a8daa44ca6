"""--debug AST dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

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
    StmtVisitor,
)


def dump_ast(statements: Sequence[Stmt], *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable statement tree to *file*."""
    file.write("Script\n")
    dumper = _Dumper(file)
    for stmt in statements:
        dumper.visit(stmt)


class _Dumper(StmtVisitor):
    def __init__(self, f: TextIO) -> None:
        self._f = f
        self._depth = 1

    def _line(self, text: str) -> None:
        self._f.write(f"{'  ' * self._depth}{text}\n")

    def _nested(self, block: Block) -> None:
        self._depth += 1
        for child in block.body:
            self.visit(child)
        self._depth -= 1

    def visit_block(self, stmt: Block) -> None:
        self._line("Block")
        self._nested(stmt)

    def visit_expression(self, stmt: Expression) -> None:
        self._line(f"Expression {self.visit_literal(stmt.expr)}")

    def visit_repeat(self, stmt: Repeat) -> None:
        self._line(f"Repeat {stmt.count}")
        self._nested(stmt.body)

    def visit_set_color(self, stmt: SetColor) -> None:
        self._line(f"SetColor {stmt.color}")

    def visit_move_forward(self, stmt: MoveForward) -> None:
        self._line(f"MoveForward {stmt.distance:g}")

    def visit_move_backward(self, stmt: MoveBackward) -> None:
        self._line(f"MoveBackward {stmt.distance:g}")

    def visit_rotate_right(self, stmt: RotateRight) -> None:
        self._line(f"RotateRight {stmt.angle:g}")

    def visit_rotate_left(self, stmt: RotateLeft) -> None:
        self._line(f"RotateLeft {stmt.angle:g}")

    def visit_literal(self, expr: Literal) -> str:
        if isinstance(expr.value, str):
            return f"Literal({expr.value})"
        return f"Literal({expr.value:g})"
