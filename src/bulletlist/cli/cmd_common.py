# topmark:header:start
#
#   project      : BulletList
#   file         : cmd_common.py
#   file_relpath : src/bulletlist/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by BulletList subcommands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, cast

import click

from bulletlist.cli.errors import BulletListConfigError, BulletListFileNotFoundError
from bulletlist.cli.options import split_nonempty_lines
from bulletlist.config.loaders import ConfigError, load_style
from bulletlist.config.logging import get_logger
from bulletlist.layout.types import ContentAlignment

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bulletlist.cli.console import ConsoleLike
    from bulletlist.core.diagnostics import DiagnosticLog
    from bulletlist.style import ListStyle, MutableListStyle

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console installed by the group callback."""
    ctx.ensure_object(dict)
    return cast("ConsoleLike", ctx.obj["console"])


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (-1 quiet, 0 terse, >0 verbose)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def is_color_enabled(ctx: click.Context) -> bool:
    """Return True if styled output is allowed for this invocation."""
    ctx.ensure_object(dict)
    return bool(ctx.obj.get("color_enabled", False))


def content_alignment_from_flag(center: bool | None) -> ContentAlignment | None:
    """Map the tri-state ``--center/--no-center`` flag to a `ContentAlignment`."""
    if center is None:
        return None
    return ContentAlignment.CENTER if center else ContentAlignment.LEADING


def report_diagnostics(ctx: click.Context, diagnostics: DiagnosticLog) -> None:
    """Print config diagnostics as warnings unless ``-q`` was given."""
    if get_effective_verbosity(ctx) < 0:
        return
    console = get_console(ctx)
    for diag in diagnostics:
        console.warn(str(diag))


def resolve_style(
    ctx: click.Context,
    overrides: MutableListStyle,
    *,
    config_paths: Iterable[str] = (),
    no_config: bool = False,
) -> ListStyle:
    """Merge config files and CLI overrides into a frozen `ListStyle`.

    Args:
        ctx (click.Context): Current Click context.
        overrides (MutableListStyle): Values given on the command line.
        config_paths (Iterable[str]): Files passed with ``--config``.
        no_config (bool): Skip project config discovery.

    Returns:
        ListStyle: The effective style.

    Raises:
        BulletListFileNotFoundError: If a ``--config`` file does not exist.
        BulletListConfigError: If a config file cannot be parsed.
    """
    paths = [Path(p) for p in config_paths]
    for path in paths:
        if not path.is_file():
            raise BulletListFileNotFoundError(f"Config file not found: {path}")
    try:
        configured, diagnostics = load_style(paths, no_config=no_config)
    except ConfigError as exc:
        raise BulletListConfigError(str(exc)) from exc

    report_diagnostics(ctx, diagnostics)
    style = configured.merge_with(overrides).freeze()
    logger.debug("Effective style: %s", style)
    return style


def read_items(items: Iterable[str], *, skip_comments: bool = False) -> list[str]:
    """Return ``items``, or the non-blank lines of STDIN when none were given.

    STDIN is only read when data is piped in; a terminal yields no items.

    Args:
        items (Iterable[str]): Values given on the command line.
        skip_comments (bool): Also drop STDIN lines starting with ``#``.

    Returns:
        list[str]: The command-line values, or the stripped STDIN lines.
    """
    collected = list(items)
    if collected:
        return collected
    if not sys.stdin or sys.stdin.isatty():
        return []
    data = sys.stdin.read()
    if skip_comments:
        return split_nonempty_lines(data)
    return [line.strip() for line in data.splitlines() if line.strip()]
