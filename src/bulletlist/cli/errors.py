# topmark:header:start
#
#   project      : BulletList
#   file         : errors.py
#   file_relpath : src/bulletlist/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the BulletList CLI.

Raise these from commands to stop with a message and a `ExitCode`. They are
printed through the project console when one is installed on the Click
context, and with Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from bulletlist.cli.exit_codes import ExitCode


class BulletListError(click.ClickException):
    """Base class for all BulletList CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain message; color is applied in `show()`."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class BulletListUsageError(BulletListError):
    """Invalid flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class BulletListDataError(BulletListError):
    """Input that cannot be converted (out-of-range number, malformed numeral)."""

    exit_code = ExitCode.DATA_ERROR


class BulletListFileNotFoundError(BulletListError):
    """Input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class BulletListConfigError(BulletListError):
    """Missing, invalid or malformed configuration."""

    exit_code = ExitCode.CONFIG_ERROR
