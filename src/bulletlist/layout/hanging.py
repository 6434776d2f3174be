# topmark:header:start
#
#   project      : BulletList
#   file         : hanging.py
#   file_relpath : src/bulletlist/layout/hanging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hanging-indent layout for a bullet/label and its body text.

The bullet sits in a fixed-width column and every wrapped line of the body
starts at the column boundary. This is expressed as a paragraph style rather
than as separate boxes:

- ``head_indent = width``: all lines but the first start at the boundary.
- ``first_line_head_indent = -width``: the first line starts ``width`` further
  left, at the paragraph's leading edge, where the bullet is drawn.
- A left tab stop at ``width`` moves the body from the bullet to the boundary.

With trailing alignment an extra right-aligned stop at ``width - trailing_gap``
is added and the text starts with a tab, so the bullet ends just before the
boundary (``"  iv.  body"`` instead of ``"iv.    body"``).

The calculation is pure; the same inputs always yield an equal layout.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Final

from bulletlist.config.logging import get_logger
from bulletlist.layout.types import (
    BulletAlignment,
    HangingLayout,
    ParagraphStyle,
    TabStop,
    TextAlignment,
)

logger = get_logger(__name__)

DEFAULT_TRAILING_GAP: Final[float] = 10.0


def hanging_tab_stops(
    width: float,
    alignment: BulletAlignment = BulletAlignment.LEADING,
    *,
    trailing_gap: float = DEFAULT_TRAILING_GAP,
) -> tuple[TabStop, ...]:
    """Return the tab stops for a bullet column of ``width``.

    Args:
        width (float): Bullet column width.
        alignment (BulletAlignment): Bullet placement inside the column.
        trailing_gap (float): Distance between the end of a trailing bullet
            and the column boundary.

    Returns:
        tuple[TabStop, ...]: One stop for leading alignment, two for trailing.
    """
    body_stop = TabStop(TextAlignment.LEFT, float(width))
    if alignment is BulletAlignment.TRAILING:
        return (TabStop(TextAlignment.RIGHT, float(width - trailing_gap)), body_stop)
    return (body_stop,)


@lru_cache(maxsize=256)
def hanging_indent(
    bullet: str,
    body: str,
    width: float,
    alignment: BulletAlignment = BulletAlignment.LEADING,
    *,
    trailing_gap: float = DEFAULT_TRAILING_GAP,
) -> HangingLayout:
    """Compose ``bullet`` and ``body`` as a hanging paragraph.

    Args:
        bullet (str): Bullet glyph or ordinal label (``"•"``, ``"iv."``).
        body (str): Body text; wrapping is left to the consumer.
        width (float): Width of the bullet column. Zero is allowed and gives a
            degenerate layout with every line at the leading edge.
        alignment (BulletAlignment): Leading or trailing bullet placement.
        trailing_gap (float): Gap before the boundary for trailing bullets.

    Returns:
        HangingLayout: The composed text and its paragraph style.
    """
    width = float(width)
    if alignment is BulletAlignment.TRAILING:
        text = f"\t{bullet}\t{body}"
    else:
        text = f"{bullet}\t{body}"

    style = ParagraphStyle(
        head_indent=width,
        # -0.0 would compare equal but print oddly in JSON output
        first_line_head_indent=-width if width else 0.0,
        tab_stops=hanging_tab_stops(width, alignment, trailing_gap=trailing_gap),
    )
    logger.trace("hanging_indent(%r, width=%s, %s) -> %s", bullet, width, alignment.key, style)
    return HangingLayout(
        text=text, paragraph_style=style, bullet=bullet, body=body, alignment=alignment
    )
