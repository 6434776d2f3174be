# topmark:header:start
#
#   project      : BulletList
#   file         : __init__.py
#   file_relpath : src/bulletlist/layout/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Layout primitives: hanging-indent paragraphs and insets."""

from __future__ import annotations

from bulletlist.layout.hanging import DEFAULT_TRAILING_GAP, hanging_indent, hanging_tab_stops
from bulletlist.layout.insets import Insets
from bulletlist.layout.types import (
    BulletAlignment,
    ContentAlignment,
    HangingLayout,
    ParagraphStyle,
    TabStop,
    TextAlignment,
)

__all__ = [
    "DEFAULT_TRAILING_GAP",
    "BulletAlignment",
    "ContentAlignment",
    "HangingLayout",
    "Insets",
    "ParagraphStyle",
    "TabStop",
    "TextAlignment",
    "hanging_indent",
    "hanging_tab_stops",
]
