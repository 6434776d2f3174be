# topmark:header:start
#
#   project      : BulletList
#   file         : options.py
#   file_relpath : src/bulletlist/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, config files,
list style) and their resolution logic, so commands and the group can stay
thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from bulletlist.cli.cli_types import EnumChoiceParam
from bulletlist.cli.errors import BulletListUsageError
from bulletlist.config.logging import get_logger
from bulletlist.layout.types import BulletAlignment
from bulletlist.markers import MarkerKind
from bulletlist.rendering.formats import OutputFormat

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` was passed.
        quiet_count: Number of times ``-q`` was passed.

    Returns:
        ``verbose_count`` (0 = terse), or ``-1`` when quiet.

    Raises:
        BulletListUsageError: If both flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise BulletListUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def split_nonempty_lines(text: str | None) -> list[str]:
    """Split ``text`` into stripped lines, dropping blanks and ``#`` comments."""
    if not text:
        return []
    out: list[str] = []
    for line in text.splitlines():
        s = line.strip()
        if not s or s.startswith("#"):
            continue
        out.append(s)
    return out


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options.
        output_format: Output format; JSON is never colored.
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled.

    Behavior:
        ``--color``/``--no-color`` win, then ``FORCE_COLOR`` and ``NO_COLOR``,
        then TTY detection.
    """
    if output_format is OutputFormat.JSON:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            # Replaced or closed stream (e.g. under a test runner)
            stdout_isatty = False
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (mutually exclusive counters)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color [auto|always|never]`` and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config FILE`` (repeatable) and ``--no-config``."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore pyproject.toml and bulletlist.toml in the current directory.",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(file_okay=True, dir_okay=False),
        help="Additional config file(s) to load and merge (last wins).",
    )(f)
    return f


def common_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format [text|json]``."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)


def common_display_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the frame toggles shared by ``render`` and ``show``.

    Every option defaults to None, meaning "keep the configured value".
    """
    f = click.option(
        "--border/--no-border",
        "show_border",
        default=None,
        help="Draw a box around each list.",
    )(f)
    f = click.option(
        "--fill/--no-fill",
        "fill_width",
        default=None,
        help="Use the full width, or shrink the frame to the text.",
    )(f)
    f = click.option(
        "--center/--no-center",
        "center",
        default=None,
        help="Center item text in its frame (only with --fill).",
    )(f)
    f = click.option(
        "--width",
        "width",
        type=click.IntRange(min=1),
        default=None,
        help="Total width in columns, margins included.",
    )(f)
    return f


def common_list_style_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add marker and bullet column options for ``render``."""
    f = click.option(
        "--marker",
        "marker",
        type=EnumChoiceParam(MarkerKind),
        default=None,
        help="Item marker style.",
    )(f)
    f = click.option("--bullet", "bullet", default=None, help="Bullet glyph for --marker bullet.")(f)
    f = click.option(
        "--start",
        "start",
        type=int,
        default=None,
        help="Ordinal of the first item for ordered markers.",
    )(f)
    f = click.option(
        "--prefix",
        "prefix",
        default=None,
        help="Text before ordinal labels, e.g. 'B.' for B.1, B.2, ...",
    )(f)
    f = click.option("--suffix", "suffix", default=None, help="Text after ordinal labels.")(f)
    f = click.option(
        "--bullet-width",
        "bullet_width",
        type=click.IntRange(min=0),
        default=None,
        help="Width of the bullet column (default: widest marker plus one).",
    )(f)
    f = click.option(
        "--align",
        "bullet_alignment",
        type=EnumChoiceParam(BulletAlignment),
        default=None,
        help="Bullet placement in its column.",
    )(f)
    f = click.option(
        "--spacing",
        "item_spacing",
        type=click.IntRange(min=0),
        default=None,
        help="Blank lines between items.",
    )(f)
    return f
