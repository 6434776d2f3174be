# topmark:header:start
#
#   project      : BulletList
#   file         : roman.py
#   file_relpath : src/bulletlist/cli/commands/roman.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BulletList `roman` command.

Converts integers to Roman numerals (or back, with ``--decode``). Values come
from the arguments or, when there are none, from STDIN (one per line).

Examples:
    ```bash
    bulletlist roman 1994 2024
    echo MCMXCIV | bulletlist roman --decode
    bulletlist roman --lenient 0 4000
    ```
"""

from __future__ import annotations

import json

import click

from bulletlist.cli.cmd_common import get_console, get_effective_verbosity, read_items
from bulletlist.cli.errors import BulletListDataError, BulletListUsageError
from bulletlist.cli.options import common_format_option
from bulletlist.rendering.formats import OutputFormat
from bulletlist.roman import (
    RomanParseError,
    RomanRangeError,
    from_roman,
    roman_numeral_for,
    to_roman,
)


def _parse_int(raw: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise BulletListDataError(f"Not an integer: {raw!r}") from exc


def _encode(raw: str, *, lower: bool, lenient: bool) -> str:
    n = _parse_int(raw)
    if lenient:
        return roman_numeral_for(n, lower=lower)
    try:
        return to_roman(n, lower=lower)
    except RomanRangeError as exc:
        raise BulletListDataError(str(exc)) from exc


def _decode(raw: str) -> int:
    try:
        return from_roman(raw)
    except RomanParseError as exc:
        raise BulletListDataError(str(exc)) from exc


@click.command(
    name="roman",
    context_settings={"ignore_unknown_options": True},
    help="Convert integers to Roman numerals (1..3999), or back with --decode.",
)
@click.argument("values", nargs=-1)
@click.option("--lower", is_flag=True, help="Use lowercase numerals (xiv).")
@click.option("--decode", is_flag=True, help="Convert Roman numerals to integers instead.")
@click.option(
    "--lenient",
    is_flag=True,
    help="Print a placeholder for out-of-range numbers instead of failing.",
)
@common_format_option
@click.pass_context
def roman_command(
    ctx: click.Context,
    values: tuple[str, ...],
    lower: bool,
    decode: bool,
    lenient: bool,
    output_format: OutputFormat | None,
) -> None:
    """Convert each value and print one result per line."""
    console = get_console(ctx)
    inputs = read_items(values, skip_comments=True)
    if not inputs:
        raise BulletListUsageError("No values given (pass them as arguments or on STDIN).")

    results: list[tuple[str, str | int]] = []
    for raw in inputs:
        if decode:
            results.append((raw, _decode(raw)))
        else:
            results.append((raw, _encode(raw, lower=lower, lenient=lenient)))

    if output_format is OutputFormat.JSON:
        console.print(
            json.dumps([{"input": raw, "output": out} for raw, out in results], ensure_ascii=False)
        )
        return

    verbose = get_effective_verbosity(ctx) > 0
    for raw, out in results:
        console.print(f"{raw} = {out}" if verbose else str(out))
