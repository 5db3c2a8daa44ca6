"""AST node types for parsed MiniLogo scripts, and the visitor used to walk them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class Literal:
    """Number or color literal."""

    value: float | str
    line: int = 0


@dataclass(frozen=True, slots=True)
class Block:
    """Bracketed, ordered statement sequence."""

    body: tuple[Stmt, ...]
    line: int = 0


@dataclass(frozen=True, slots=True)
class Expression:
    """Bare literal in statement position; has no turtle effect."""

    expr: Literal
    line: int = 0


@dataclass(frozen=True, slots=True)
class Repeat:
    """REPEAT count [ ... ] — body is always a Block."""

    count: int
    body: Block
    line: int = 0


@dataclass(frozen=True, slots=True)
class SetColor:
    color: str
    line: int = 0


@dataclass(frozen=True, slots=True)
class MoveForward:
    distance: float
    line: int = 0


@dataclass(frozen=True, slots=True)
class MoveBackward:
    distance: float
    line: int = 0


@dataclass(frozen=True, slots=True)
class RotateRight:
    """Clockwise turn, in degrees."""

    angle: float
    line: int = 0


@dataclass(frozen=True, slots=True)
class RotateLeft:
    """Counter-clockwise turn, in degrees."""

    angle: float
    line: int = 0


Stmt = Union[Block, Expression, Repeat, SetColor, MoveForward, MoveBackward, RotateRight, RotateLeft]


class StmtVisitor:
    """Dispatch statements to one ``visit_*`` method per node type.

    Subclasses implement the methods they need; an unhandled node type
    raises NotImplementedError.
    """

    def visit(self, stmt: Stmt) -> Any:
        if isinstance(stmt, Block):
            return self.visit_block(stmt)
        if isinstance(stmt, Expression):
            return self.visit_expression(stmt)
        if isinstance(stmt, Repeat):
            return self.visit_repeat(stmt)
        if isinstance(stmt, SetColor):
            return self.visit_set_color(stmt)
        if isinstance(stmt, MoveForward):
            return self.visit_move_forward(stmt)
        if isinstance(stmt, MoveBackward):
            return self.visit_move_backward(stmt)
        if isinstance(stmt, RotateRight):
            return self.visit_rotate_right(stmt)
        if isinstance(stmt, RotateLeft):
            return self.visit_rotate_left(stmt)
        raise TypeError(f"not a statement: {type(stmt).__name__}")

    def visit_block(self, stmt: Block) -> Any:
        raise NotImplementedError

    def visit_expression(self, stmt: Expression) -> Any:
        raise NotImplementedError

    def visit_repeat(self, stmt: Repeat) -> Any:
        raise NotImplementedError

    def visit_set_color(self, stmt: SetColor) -> Any:
        raise NotImplementedError

    def visit_move_forward(self, stmt: MoveForward) -> Any:
        raise NotImplementedError

    def visit_move_backward(self, stmt: MoveBackward) -> Any:
        raise NotImplementedError

    def visit_rotate_right(self, stmt: RotateRight) -> Any:
        raise NotImplementedError

    def visit_rotate_left(self, stmt: RotateLeft) -> Any:
        raise NotImplementedError

    def visit_literal(self, expr: Literal) -> Any:
        raise NotImplementedError
