# topmark:header:start
#
#   project      : BulletList
#   file         : __main__.py
#   file_relpath : src/bulletlist/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running BulletList via ``python -m bulletlist``.

Delegates to `bulletlist.cli.main.cli`, the same group as the ``bulletlist``
console script.
"""

from __future__ import annotations

from bulletlist.cli.main import cli

if __name__ == "__main__":
    cli()
