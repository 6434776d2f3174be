# topmark:header:start
#
#   project      : BulletList
#   file         : layout.py
#   file_relpath : src/bulletlist/cli/commands/layout.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BulletList `layout` command.

Prints the hanging-indent descriptor computed for a bullet and a body: the
composed text, the indents and the tab stops a text engine needs.
"""

from __future__ import annotations

import json

import click

from bulletlist.cli.cli_types import EnumChoiceParam
from bulletlist.cli.cmd_common import get_console
from bulletlist.cli.options import common_format_option
from bulletlist.layout.hanging import DEFAULT_TRAILING_GAP, hanging_indent
from bulletlist.layout.types import BulletAlignment
from bulletlist.rendering.formats import OutputFormat


@click.command(name="layout", help="Show the hanging-indent layout for BULLET and BODY.")
@click.argument("bullet")
@click.argument("body")
@click.option(
    "--width",
    type=click.FloatRange(min=0),
    default=20.0,
    show_default=True,
    help="Width of the bullet column.",
)
@click.option(
    "--align",
    "alignment",
    type=EnumChoiceParam(BulletAlignment),
    default=BulletAlignment.LEADING.value,
    show_default=True,
    help="Bullet placement in its column.",
)
@click.option(
    "--trailing-gap",
    type=click.FloatRange(min=0),
    default=DEFAULT_TRAILING_GAP,
    show_default=True,
    help="Gap between a trailing bullet and the body.",
)
@common_format_option
@click.pass_context
def layout_command(
    ctx: click.Context,
    bullet: str,
    body: str,
    width: float,
    alignment: BulletAlignment,
    trailing_gap: float,
    output_format: OutputFormat | None,
) -> None:
    """Compute and print the layout descriptor."""
    console = get_console(ctx)
    layout = hanging_indent(bullet, body, width, alignment, trailing_gap=trailing_gap)
    data = layout.to_dict()

    if output_format is OutputFormat.JSON:
        console.print(json.dumps(data, ensure_ascii=False))
        return

    style = layout.paragraph_style
    stops = ", ".join(f"{stop.alignment.key}@{stop.location:g}" for stop in style.tab_stops)
    rows = [
        ("text", repr(layout.text)),
        ("alignment", alignment.key),
        ("head_indent", f"{style.head_indent:g}"),
        ("first_line_head_indent", f"{style.first_line_head_indent:g}"),
        ("tab_stops", stops),
    ]
    key_width = max(len(key) for key, _ in rows)
    for key, value in rows:
        console.print(f"{console.styled(key.ljust(key_width), bold=True)} : {value}")
