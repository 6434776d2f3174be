# topmark:header:start
#
#   project      : BulletList
#   file         : __init__.py
#   file_relpath : src/bulletlist/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BulletList CLI package.

The console script entry point is defined in ``pyproject.toml``::

    [project.scripts]
    bulletlist = "bulletlist.cli.main:cli"

All subcommands live in `bulletlist.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
