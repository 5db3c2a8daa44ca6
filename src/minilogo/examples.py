"""Bundled example scripts and the command reference card."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Example:
    """A named, ready-to-run script."""

    name: str
    title: str
    source: str


@dataclass(frozen=True, slots=True)
class CommandRef:
    """One row of the reference card."""

    usage: str
    example: str
    description: str


def _make_examples() -> dict[str, Example]:
    defs: dict[str, Example] = {}

    def d(name: str, title: str, source: str) -> None:
        defs[name] = Example(name, title, source)

    d(
        "welcome",
        "Welcome example",
        "REPEAT 3 [\n"
        "    COLOR #00ff00\n"
        "    RT 60 FD 50\n"
        "    COLOR #ff0000\n"
        "    RT 60 FD 50\n"
        "]\n",
    )
    d("hexagon", "Hexagon", "REPEAT 6 [ RT 60 FD 100 ]\n")

    return defs


EXAMPLES: dict[str, Example] = _make_examples()

REFERENCE: tuple[CommandRef, ...] = (
    CommandRef("FORWARD <number> | FD <number>", "FD 50", "Move forward for <number>."),
    CommandRef("BACK <number> | BK <number>", "BK 100", "Move back for <number>."),
    CommandRef(
        "RIGHT <number> | RT <number>", "RT 60", "Rotate to the right for <number> degrees."
    ),
    CommandRef("LEFT <number> | LT <number>", "LT 30", "Rotate to the left for <number> degrees."),
    CommandRef("COLOR <hex color>", "COLOR #663399", "Set color for the line."),
    CommandRef(
        "REPEAT <number> [ <code> ]",
        "REPEAT 2 [ FD 50 RT 30 ]",
        "<code> gets repeated <number> of times.",
    ),
)


def format_reference() -> str:
    """Render the reference card as an aligned plain-text table."""
    header = CommandRef("Command", "Example", "Description")
    rows = (header, *REFERENCE)
    usage_w = max(len(r.usage) for r in rows)
    example_w = max(len(r.example) for r in rows)
    lines = [f"{r.usage:<{usage_w}}  {r.example:<{example_w}}  {r.description}" for r in rows]
    return "\n".join(lines) + "\n"
