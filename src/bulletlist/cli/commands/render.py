# topmark:header:start
#
#   project      : BulletList
#   file         : render.py
#   file_relpath : src/bulletlist/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BulletList `render` command.

Renders ITEMS (or the non-blank lines of STDIN) as a list with a hanging
indent. Options override the configured ``[style]``; see
`bulletlist.style` for the merge order.

Examples:
    ```bash
    bulletlist render "Short item" "A much longer item that will wrap" --width 30
    bulletlist render --marker roman --align trailing --bullet-width 6 a b c
    cat todo.txt | bulletlist render --marker numeric --border
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bulletlist.cli.cmd_common import (
    content_alignment_from_flag,
    get_console,
    is_color_enabled,
    read_items,
    resolve_style,
)
from bulletlist.cli.errors import BulletListUsageError
from bulletlist.cli.options import (
    common_config_options,
    common_display_options,
    common_list_style_options,
)
from bulletlist.rendering.text import render_list
from bulletlist.style import MutableListStyle

if TYPE_CHECKING:
    from bulletlist.layout.types import BulletAlignment
    from bulletlist.markers import MarkerKind


@click.command(name="render", help="Render ITEMS as a list with a hanging indent.")
@click.argument("items", nargs=-1)
@common_list_style_options
@common_display_options
@common_config_options
@click.pass_context
def render_command(
    ctx: click.Context,
    items: tuple[str, ...],
    *,
    marker: MarkerKind | None,
    bullet: str | None,
    start: int | None,
    prefix: str | None,
    suffix: str | None,
    bullet_width: int | None,
    bullet_alignment: BulletAlignment | None,
    item_spacing: int | None,
    show_border: bool | None,
    fill_width: bool | None,
    center: bool | None,
    width: int | None,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Render the items with the effective style."""
    console = get_console(ctx)
    entries = read_items(items)
    if not entries:
        raise BulletListUsageError("No items given (pass them as arguments or on STDIN).")

    overrides = MutableListStyle(
        item_spacing=item_spacing,
        marker=marker,
        bullet=bullet,
        prefix=prefix,
        start=start,
        suffix=suffix,
        bullet_width=bullet_width,
        bullet_alignment=bullet_alignment,
        show_border=show_border,
        fill_width=fill_width,
        content_alignment=content_alignment_from_flag(center),
        width=width,
    )
    style = resolve_style(ctx, overrides, config_paths=config_paths, no_config=no_config)
    for line in render_list(entries, style, color=is_color_enabled(ctx)):
        console.print(line)
