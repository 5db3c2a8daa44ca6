"""Command-line interface for MiniLogo."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from minilogo.effects import Effect, effect_to_dict
from minilogo.errors import LogoError
from minilogo.examples import EXAMPLES, format_reference
from minilogo.log import logger
from minilogo.turtle import Surface

SUCCESS_MESSAGE = "Done!"
_NON_FINITE = "drawing left the representable coordinate range"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    example: str | None
    output_file: Path | None
    surface: Surface
    watch: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="minilogo",
        description="MiniLogo turtle-graphics interpreter",
    )
    p.add_argument("input", nargs="?", help="Input .logo script")
    p.add_argument("-o", "--output", help="Output JSON file (default: stdout)")
    p.add_argument("--width", type=float, default=None, help="Surface width (default: 365)")
    p.add_argument("--height", type=float, default=None, help="Surface height (default: 365)")
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover minilogo.toml)",
    )
    p.add_argument("--example", metavar="NAME", help="Run a bundled example instead of a file")
    p.add_argument("--list-examples", action="store_true", help="List bundled examples")
    p.add_argument("--reference", action="store_true", help="Print the command reference")
    p.add_argument("--watch", action="store_true", help="Watch for changes and re-run")
    p.add_argument("--debug", action="store_true", help="Dump AST to stderr")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "minilogo.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    if args.example is not None:
        if args.example not in EXAMPLES:
            names = ", ".join(sorted(EXAMPLES))
            raise argparse.ArgumentTypeError(
                f"unknown example: {args.example} (available: {names})"
            )
        input_file = None
    elif args.input:
        input_file = Path(args.input)
    else:
        raise argparse.ArgumentTypeError("an input script or --example is required")

    input_dir = input_file.parent if input_file is not None else Path(".")
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    defaults = Surface()
    width, height = defaults.width, defaults.height
    cfg_surface = config.get("surface")
    if isinstance(cfg_surface, dict):
        cfg_width = cfg_surface.get("width")
        if isinstance(cfg_width, (int, float)):
            width = float(cfg_width)
        cfg_height = cfg_surface.get("height")
        if isinstance(cfg_height, (int, float)):
            height = float(cfg_height)
    if args.width is not None:
        width = args.width
    if args.height is not None:
        height = args.height
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"surface size must be positive: {width}x{height}")

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        example=args.example,
        output_file=output_file,
        surface=Surface(width, height),
        watch=args.watch,
        debug=args.debug,
    )


def _read_source(options: CliOptions) -> tuple[str, str]:
    """Return (source, display filename) for the script to run."""
    if options.input_file is None:
        return EXAMPLES[options.example].source, f"<example:{options.example}>"
    return options.input_file.read_text(encoding="utf-8"), str(options.input_file)


def run_file(options: CliOptions) -> list[Effect]:
    """Read, parse, and evaluate a script, returning its drawing effects."""
    from minilogo.debug import dump_ast
    from minilogo.eval import evaluate
    from minilogo.parser import parse

    source, filename = _read_source(options)
    logger.debug("running %s", filename)
    statements = parse(source)

    if options.debug:
        dump_ast(statements)

    return evaluate(statements, options.surface)


def effects_to_json(effects: list[Effect]) -> str:
    """Serialise effects as strict JSON; raises ValueError on inf/nan coordinates."""
    return json.dumps([effect_to_dict(e) for e in effects], indent=2, allow_nan=False) + "\n"


def _write_output(options: CliOptions, effects: list[Effect]) -> None:
    text = effects_to_json(effects)
    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
        sys.stdout.flush()


def _display_name(options: CliOptions) -> str:
    if options.input_file is not None:
        return str(options.input_file)
    return f"<example:{options.example}>"


def watch_loop(options: CliOptions) -> None:
    """Poll input file for changes, re-run on each modification."""
    if options.input_file is None:
        print("error: --watch needs an input file", file=sys.stderr)
        return
    last_mtime = 0.0
    print(f"Watching {options.input_file} for changes...", file=sys.stderr)
    try:
        while True:
            try:
                mtime = options.input_file.stat().st_mtime
            except OSError:
                time.sleep(0.5)
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                try:
                    _write_output(options, run_file(options))
                    print(SUCCESS_MESSAGE, file=sys.stderr)
                except LogoError as exc:
                    print(exc.format(_display_name(options)), file=sys.stderr)
                except ValueError:
                    print(f"error: {_NON_FINITE}", file=sys.stderr)
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    if args.reference:
        sys.stdout.write(format_reference())
        return 0

    if args.list_examples:
        for example in EXAMPLES.values():
            print(f"{example.name:<10} {example.title}")
        return 0

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.watch:
        watch_loop(options)
        return 0

    try:
        effects = run_file(options)
    except LogoError as exc:
        print(exc.format(_display_name(options)), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        _write_output(options, effects)
    except ValueError:
        print(f"error: {_NON_FINITE}", file=sys.stderr)
        return 1
    print(SUCCESS_MESSAGE, file=sys.stderr)
    return 0
