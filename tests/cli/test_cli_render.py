# topmark:header:start
#
#   project      : BulletList
#   file         : test_cli_render.py
#   file_relpath : tests/cli/test_cli_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `bulletlist render`, including config file handling."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_FILE_NOT_FOUND,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    output_lines,
    run_cli,
    run_cli_in,
)

if TYPE_CHECKING:
    from pathlib import Path

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def test_render_wraps_under_text(isolation: Path) -> None:
    result = run_cli(
        ["render", "--width", "30", "Short item", "Very long item that needs more than one line"]
    )
    assert_SUCCESS(result)
    assert output_lines(result) == [
        "• Short item",
        "• Very long item that needs",
        "  more than one line",
    ]


def test_render_trailing_roman(isolation: Path) -> None:
    result = run_cli(
        ["render", "--marker", "roman", "--align", "trailing", "--bullet-width", "6", "a", "b"]
        + ["c", "d"]
    )
    assert_SUCCESS(result)
    assert output_lines(result) == ["   I. a", "  II. b", " III. c", "  IV. d"]


def test_render_numeric_with_prefix_and_spacing(isolation: Path) -> None:
    result = run_cli(
        ["render", "--marker", "numeric", "--prefix", "B.", "--suffix", "", "--spacing", "1"]
        + ["--start", "3", "x", "y"]
    )
    assert_SUCCESS(result)
    assert output_lines(result) == ["B.3 x", "", "B.4 y"]


def test_render_reads_stdin(isolation: Path) -> None:
    result = run_cli(["render", "--bullet", "-"], input_text="one\n\n  two  \n")
    assert_SUCCESS(result)
    assert output_lines(result) == ["- one", "- two"]


def test_render_without_items(isolation: Path) -> None:
    assert_USAGE_ERROR(run_cli(["render"]))


def test_render_border(isolation: Path) -> None:
    result = run_cli(["render", "--border", "--width", "12", "a"])
    assert_SUCCESS(result)
    assert output_lines(result) == [
        "┌──────────┐",
        "│• a       │",
        "└──────────┘",
    ]


def test_render_border_shrinks_without_fill(isolation: Path) -> None:
    result = run_cli(["render", "--border", "--no-fill", "--width", "40", "a", "bb"])
    assert_SUCCESS(result)
    assert output_lines(result) == [
        "┌────┐",
        "│• a │",
        "│• bb│",
        "└────┘",
    ]


def test_render_reads_project_config(isolation: Path) -> None:
    (isolation / "bulletlist.toml").write_text(
        '[style]\nmarker = "numeric"\nmargin = { left = 2 }\n', encoding="utf-8"
    )
    result = run_cli(["render", "a", "b"])
    assert_SUCCESS(result)
    assert output_lines(result) == ["  1. a", "  2. b"]


def test_render_cli_overrides_config(isolation: Path) -> None:
    (isolation / "bulletlist.toml").write_text('[style]\nmarker = "numeric"\n', encoding="utf-8")
    result = run_cli(["render", "--marker", "alpha", "a"])
    assert_SUCCESS(result)
    assert output_lines(result) == ["a. a"]


def test_render_no_config(isolation: Path) -> None:
    (isolation / "bulletlist.toml").write_text('[style]\nmarker = "numeric"\n', encoding="utf-8")
    result = run_cli(["render", "--no-config", "a"])
    assert_SUCCESS(result)
    assert output_lines(result) == ["• a"]


def test_render_explicit_config(tmp_path: Path) -> None:
    cfg = tmp_path / "style.toml"
    cfg.write_text('[style]\nbullet = "*"\n', encoding="utf-8")
    result = run_cli_in(tmp_path, ["render", "--config", str(cfg), "a"])
    assert_SUCCESS(result)
    assert output_lines(result) == ["* a"]


def test_render_missing_config(isolation: Path) -> None:
    result = run_cli(["render", "--config", "nope.toml", "a"])
    assert_FILE_NOT_FOUND(result)
    assert "nope.toml" in result.stderr


def test_render_malformed_config(isolation: Path) -> None:
    (isolation / "bulletlist.toml").write_text("[style\n", encoding="utf-8")
    assert_CONFIG_ERROR(run_cli(["render", "a"]))


def test_render_reports_config_warnings(isolation: Path) -> None:
    (isolation / "bulletlist.toml").write_text("[style]\nshow_border = 1\n", encoding="utf-8")
    result = run_cli(["render", "a"])
    assert_SUCCESS(result)
    assert "Expected bool" in result.stderr
    assert output_lines(result) == ["• a"]

    quiet = run_cli(["-q", "render", "a"])
    assert_SUCCESS(quiet)
    assert quiet.stderr == ""
