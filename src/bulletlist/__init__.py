# topmark:header:start
#
#   project      : BulletList
#   file         : __init__.py
#   file_relpath : src/bulletlist/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BulletList package.

BulletList composes bullets and list labels with their text so that wrapped
lines hang under the text instead of under the bullet. It also converts
integers to Roman numerals for ordered lists, renders lists in the terminal
and ships a small gallery of example pages behind a Click CLI.
"""

from __future__ import annotations

from bulletlist.layout.hanging import hanging_indent
from bulletlist.roman import from_roman, roman_numeral_for, to_roman

__all__ = [
    "from_roman",
    "hanging_indent",
    "roman_numeral_for",
    "to_roman",
]
