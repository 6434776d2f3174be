# topmark:header:start
#
#   project      : BulletList
#   file         : show.py
#   file_relpath : src/bulletlist/cli/commands/show.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BulletList `show` command: render one gallery page.

Examples:
    ```bash
    bulletlist show roman-numeral-list
    bulletlist show "Master Page" --dataset data3 --border --width 60
    ```
"""

from __future__ import annotations

import click

from bulletlist.cli.cli_types import EnumChoiceParam
from bulletlist.cli.cmd_common import (
    content_alignment_from_flag,
    get_console,
    is_color_enabled,
    resolve_style,
)
from bulletlist.cli.errors import BulletListUsageError
from bulletlist.cli.options import common_config_options, common_display_options
from bulletlist.gallery import get_page, list_pages, render_page
from bulletlist.samples import DEFAULT_DATASET, DataSet
from bulletlist.style import MutableListStyle


@click.command(name="show", help="Render the gallery page PAGE (see 'bulletlist pages').")
@click.argument("page_name", metavar="PAGE")
@click.option(
    "--dataset",
    type=EnumChoiceParam(DataSet),
    default=DEFAULT_DATASET.value,
    show_default=True,
    help="Sample items to render: "
    + ", ".join(f"{d.key} ({d.label.lower()})" for d in DataSet)
    + ".",
)
@common_display_options
@common_config_options
@click.pass_context
def show_command(
    ctx: click.Context,
    page_name: str,
    *,
    dataset: DataSet,
    show_border: bool | None,
    fill_width: bool | None,
    center: bool | None,
    width: int | None,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Render every section of the page with the chosen data set."""
    console = get_console(ctx)
    try:
        page = get_page(page_name)
    except KeyError as exc:
        known = ", ".join(p.slug for p in list_pages())
        raise BulletListUsageError(f"Unknown page {page_name!r}. Known pages: {known}") from exc

    overrides = MutableListStyle(
        show_border=show_border,
        fill_width=fill_width,
        content_alignment=content_alignment_from_flag(center),
        width=width,
    )
    base = resolve_style(ctx, overrides, config_paths=config_paths, no_config=no_config)
    for line in render_page(page, dataset.items, base, color=is_color_enabled(ctx)):
        console.print(line)
