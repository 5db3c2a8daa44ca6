"""Tests for TOML config file loading."""

from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from minilogo.cli import build_parser, load_config, resolve_options


def _opts(*argv: str):
    return resolve_options(build_parser().parse_args(list(argv)))


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text("[surface]\nwidth = 800\n")
        assert load_config(cfg, tmp_path)["surface"] == {"width": 800}

    def test_auto_discover_minilogo_toml(self, tmp_path: Path) -> None:
        (tmp_path / "minilogo.toml").write_text("[surface]\nheight = 120\n")
        assert load_config(None, tmp_path)["surface"] == {"height": 120}


class TestConfigMerge:
    def test_defaults(self, tmp_path: Path) -> None:
        script = tmp_path / "s.logo"
        script.write_text("")
        opts = _opts(str(script))
        assert (opts.surface.width, opts.surface.height) == (365.0, 365.0)

    def test_config_surface(self, tmp_path: Path) -> None:
        (tmp_path / "minilogo.toml").write_text("[surface]\nwidth = 640\nheight = 480.5\n")
        script = tmp_path / "s.logo"
        script.write_text("")
        opts = _opts(str(script))
        assert (opts.surface.width, opts.surface.height) == (640.0, 480.5)

    def test_cli_overrides_config(self, tmp_path: Path) -> None:
        (tmp_path / "minilogo.toml").write_text("[surface]\nwidth = 640\nheight = 480\n")
        script = tmp_path / "s.logo"
        script.write_text("")
        opts = _opts(str(script), "--width", "100")
        assert (opts.surface.width, opts.surface.height) == (100.0, 480.0)

    def test_explicit_config_flag(self, tmp_path: Path) -> None:
        cfg = tmp_path / "other.toml"
        cfg.write_text("[surface]\nwidth = 50\n")
        script = tmp_path / "s.logo"
        script.write_text("")
        opts = _opts(str(script), "--config", str(cfg))
        assert opts.surface.width == 50.0

    def test_non_numeric_values_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "minilogo.toml").write_text('[surface]\nwidth = "wide"\n')
        script = tmp_path / "s.logo"
        script.write_text("")
        assert _opts(str(script)).surface.width == 365.0

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "minilogo.toml").write_text("[surface\n")
        script = tmp_path / "s.logo"
        script.write_text("")
        with pytest.raises(argparse.ArgumentTypeError, match="invalid config"):
            _opts(str(script))

    def test_output_path(self, tmp_path: Path) -> None:
        script = tmp_path / "s.logo"
        script.write_text("")
        opts = _opts(str(script), "-o", str(tmp_path / "o.json"))
        assert opts.output_file == tmp_path / "o.json"
