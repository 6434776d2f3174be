# topmark:header:start
#
#   project      : BulletList
#   file         : version.py
#   file_relpath : src/bulletlist/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BulletList `version` command.

Prints the version of BulletList installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from bulletlist.cli.cmd_common import get_console, get_effective_verbosity
from bulletlist.cli.options import common_format_option
from bulletlist.constants import BULLETLIST_VERSION
from bulletlist.rendering.formats import OutputFormat
from bulletlist.utils.version import pep440_to_semver


@click.command(name="version", help="Show the current version of BulletList.")
@click.option(
    "--semver",
    is_flag=True,
    default=False,
    help="Render the version as SemVer instead of PEP 440 (rc1 -> -rc.1, dev1 -> -dev.1).",
)
@common_format_option
@click.pass_context
def version_command(
    ctx: click.Context,
    *,
    semver: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """Show the current version of BulletList.

    Args:
        ctx (click.Context): Click context.
        semver (bool): Render as SemVer if True, PEP 440 otherwise.
        output_format (OutputFormat | None): Text (default) or JSON.
    """
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    version_text = BULLETLIST_VERSION
    if semver:
        try:
            version_text = pep440_to_semver(BULLETLIST_VERSION)
        except ValueError as exc:
            # Fall back to the raw version; explain why when verbose.
            if vlevel > 0:
                console.warn(str(exc))

    scheme = "semver" if semver else "pep440"
    if output_format is OutputFormat.JSON:
        console.print(json.dumps({"version": version_text, "format": scheme}))
    elif vlevel > 0:
        console.print(console.styled(f"BulletList version ({scheme}):", bold=True, underline=True))
        console.print(f"    {console.styled(version_text, bold=True)}")
    else:
        console.print(console.styled(version_text, bold=True))
