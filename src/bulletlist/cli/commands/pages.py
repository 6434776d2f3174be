# topmark:header:start
#
#   project      : BulletList
#   file         : pages.py
#   file_relpath : src/bulletlist/cli/commands/pages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BulletList `pages` command: list the gallery pages."""

from __future__ import annotations

import json

import click

from bulletlist.cli.cmd_common import get_console, get_effective_verbosity
from bulletlist.cli.options import common_format_option
from bulletlist.gallery import list_pages
from bulletlist.rendering.formats import OutputFormat


@click.command(name="pages", help="List the demonstration pages available to 'show'.")
@common_format_option
@click.pass_context
def pages_command(ctx: click.Context, output_format: OutputFormat | None) -> None:
    """Print one page per line: slug and description."""
    console = get_console(ctx)
    pages = list_pages()

    if output_format is OutputFormat.JSON:
        payload = [
            {
                "name": page.name,
                "slug": page.slug,
                "description": page.description,
                "sections": [section.title for section in page.sections],
            }
            for page in pages
        ]
        console.print(json.dumps(payload, ensure_ascii=False))
        return

    slug_width = max(len(page.slug) for page in pages)
    verbose = get_effective_verbosity(ctx) > 0
    for page in pages:
        slug = console.styled(page.slug.ljust(slug_width), bold=True)
        console.print(f"{slug}  {page.description}")
        if verbose:
            for section in page.sections:
                console.print(f"{'':{slug_width}}    - {section.title}")
