"""Tree-walking evaluator — drives the turtle and emits drawing effects."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

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
from minilogo.effects import ClearSurface, DrawLine, Effect, RenderCursor
from minilogo.log import logger
from minilogo.parser import parse
from minilogo.turtle import Surface, Turtle


class Evaluator(StmtVisitor):
    """Execute statements in program order against one turtle.

    Every effect is appended to ``effects`` and, when given, passed to
    ``sink`` as soon as it is produced. An instance runs one script.
    """

    def __init__(
        self,
        surface: Surface | None = None,
        sink: Callable[[Effect], None] | None = None,
    ) -> None:
        self.surface = surface if surface is not None else Surface()
        self.turtle = Turtle.centered(self.surface)
        self.effects: list[Effect] = []
        self._sink = sink
        self._done = False

    def run_script(self, statements: Sequence[Stmt]) -> list[Effect]:
        """Clear the surface, execute *statements*, then place the cursor."""
        if self._done:
            raise RuntimeError("an Evaluator runs a single script")
        self._done = True
        self._emit(ClearSurface())
        self.execute(statements)
        self._emit(RenderCursor(self.turtle.pose))
        logger.debug("evaluated script: %d effects", len(self.effects))
        return self.effects

    def execute(self, statements: Sequence[Stmt]) -> None:
        for stmt in statements:
            self.visit(stmt)

    def _emit(self, effect: Effect) -> None:
        self.effects.append(effect)
        if self._sink is not None:
            self._sink(effect)

    def _move(self, distance: float) -> None:
        t = self.turtle
        start = t.pose
        # Surface y grows downward, so a positive sine moves up
        t.x += distance * math.cos(t.heading)
        t.y -= distance * math.sin(t.heading)
        self._emit(DrawLine(start, t.pose, t.color))

    # ------------------------------------------------------------------
    # Statement visitors
    # ------------------------------------------------------------------

    def visit_block(self, stmt: Block) -> None:
        self.execute(stmt.body)

    def visit_expression(self, stmt: Expression) -> None:
        self.visit_literal(stmt.expr)

    def visit_repeat(self, stmt: Repeat) -> None:
        for _ in range(stmt.count):
            self.visit_block(stmt.body)

    def visit_set_color(self, stmt: SetColor) -> None:
        self.turtle.color = stmt.color

    def visit_move_forward(self, stmt: MoveForward) -> None:
        self._move(stmt.distance)

    def visit_move_backward(self, stmt: MoveBackward) -> None:
        self._move(-stmt.distance)

    def visit_rotate_right(self, stmt: RotateRight) -> None:
        self.turtle.heading -= math.radians(stmt.angle)

    def visit_rotate_left(self, stmt: RotateLeft) -> None:
        self.turtle.heading += math.radians(stmt.angle)

    def visit_literal(self, expr: Literal) -> float | str:
        return expr.value


def evaluate(
    statements: Sequence[Stmt],
    surface: Surface | None = None,
    sink: Callable[[Effect], None] | None = None,
) -> list[Effect]:
    """Run parsed statements on a fresh turtle and return the effect list."""
    return Evaluator(surface, sink).run_script(statements)


def run(
    source: str,
    surface: Surface | None = None,
    sink: Callable[[Effect], None] | None = None,
) -> list[Effect]:
    """Parse and evaluate MiniLogo source text.

    Raises TokenizeError or ParseError on the first failure; nothing is
    evaluated in that case.
    """
    return evaluate(parse(source), surface, sink)
