# topmark:header:start
#
#   project      : BulletList
#   file         : constants.py
#   file_relpath : src/bulletlist/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BulletList constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

BULLETLIST_VERSION: str = get_version("bulletlist")
