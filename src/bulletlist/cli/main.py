# topmark:header:start
#
#   project      : BulletList
#   file         : main.py
#   file_relpath : src/bulletlist/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the ``bulletlist`` command.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj`` together with the project console; subcommands read them through
`bulletlist.cli.cmd_common`.
"""

from __future__ import annotations

import click

from bulletlist.cli.commands.layout import layout_command
from bulletlist.cli.commands.pages import pages_command
from bulletlist.cli.commands.render import render_command
from bulletlist.cli.commands.roman import roman_command
from bulletlist.cli.commands.show import show_command
from bulletlist.cli.commands.version import version_command
from bulletlist.cli.console import ClickConsole
from bulletlist.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from bulletlist.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is driven by the environment, not by -v/-q.
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: %s", {k: v for k, v in ctx.obj.items() if k != "console"})


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Bullet lists with hanging indents, and Roman numerals.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the BulletList CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'bulletlist pages' and 'bulletlist show PAGE' to browse examples.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(roman_command)

cli.add_command(layout_command)

cli.add_command(render_command)

cli.add_command(pages_command)

cli.add_command(show_command)

if __name__ == "__main__":
    cli()
