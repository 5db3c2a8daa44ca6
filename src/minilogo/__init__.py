"""MiniLogo turtle-graphics interpreter."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minilogo.effects import Effect
    from minilogo.turtle import Surface

__version__ = "0.1.0"


def run(source: str, surface: Surface | None = None) -> list[Effect]:
    """Tokenize, parse, and evaluate MiniLogo source into drawing effects."""
    from minilogo.eval import run as _run

    return _run(source, surface)
