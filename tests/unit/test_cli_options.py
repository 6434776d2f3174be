# topmark:header:start
#
#   project      : BulletList
#   file         : test_cli_options.py
#   file_relpath : tests/unit/test_cli_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for shared CLI option helpers and parameter types."""

from __future__ import annotations

import io
import sys

import click
import pytest

from bulletlist.cli.cli_types import EnumChoiceParam
from bulletlist.cli.cmd_common import content_alignment_from_flag, read_items
from bulletlist.cli.errors import BulletListUsageError
from bulletlist.cli.exit_codes import ExitCode
from bulletlist.cli.options import (
    ColorMode,
    resolve_color_mode,
    resolve_verbosity,
    split_nonempty_lines,
)
from bulletlist.layout import ContentAlignment
from bulletlist.markers import MarkerKind
from bulletlist.rendering.formats import OutputFormat
from tests.conftest import parametrize


@parametrize("verbose, quiet, expected", [(0, 0, 0), (2, 0, 2), (0, 1, -1), (0, 3, -1)])
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    assert resolve_verbosity(verbose, quiet) == expected


def test_resolve_verbosity_conflict() -> None:
    with pytest.raises(BulletListUsageError) as excinfo:
        resolve_verbosity(1, 1)
    assert excinfo.value.exit_code == ExitCode.USAGE_ERROR


def test_split_nonempty_lines() -> None:
    assert split_nonempty_lines(None) == []
    assert split_nonempty_lines(" a \n\n# note\nb\n") == ["a", "b"]


@pytest.mark.filterwarnings("error::DeprecationWarning")
def test_read_items_from_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO(" a \n\n# note\nb\n"))
    assert read_items([]) == ["a", "# note", "b"]

    monkeypatch.setattr(sys, "stdin", io.StringIO(" a \n\n# note\nb\n"))
    assert read_items([], skip_comments=True) == ["a", "b"]

    assert read_items(["x"]) == ["x"]


def test_read_items_ignores_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    class _Tty(io.StringIO):
        def isatty(self) -> bool:
            return True

    monkeypatch.setattr(sys, "stdin", _Tty("ignored\n"))
    assert read_items([]) == []


def test_color_mode_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)

    def on_tty(mode: ColorMode | None) -> bool:
        return resolve_color_mode(cli_mode=mode, output_format=None, stdout_isatty=True)

    assert resolve_color_mode(cli_mode=ColorMode.ALWAYS, output_format=None) is True
    assert (
        resolve_color_mode(cli_mode=ColorMode.ALWAYS, output_format=OutputFormat.JSON) is False
    )
    assert on_tty(ColorMode.NEVER) is False
    assert on_tty(ColorMode.AUTO) is True

    monkeypatch.setenv("NO_COLOR", "1")
    assert on_tty(ColorMode.AUTO) is False

    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(cli_mode=None, output_format=None, stdout_isatty=False) is True


def test_enum_choice_param() -> None:
    param = EnumChoiceParam(MarkerKind)
    assert param.convert("roman", None, None) is MarkerKind.ROMAN
    assert param.convert("Upper_Roman", None, None) is MarkerKind.ROMAN
    assert param.convert(MarkerKind.ALPHA, None, None) is MarkerKind.ALPHA
    with pytest.raises(click.BadParameter):
        param.convert("hexagonal", None, None)


def test_enum_choice_param_plain_enum() -> None:
    param = EnumChoiceParam(ColorMode)
    assert param.convert("ALWAYS", None, None) is ColorMode.ALWAYS


def test_content_alignment_from_flag() -> None:
    assert content_alignment_from_flag(None) is None
    assert content_alignment_from_flag(True) is ContentAlignment.CENTER
    assert content_alignment_from_flag(False) is ContentAlignment.LEADING
