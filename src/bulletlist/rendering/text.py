# topmark:header:start
#
#   project      : BulletList
#   file         : text.py
#   file_relpath : src/bulletlist/rendering/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Monospaced rendering of hanging paragraphs and lists.

This is a small consumer of `bulletlist.layout.HangingLayout`: distances are
character columns, tab stops are honoured the way a text engine honours them
(next stop to the right of the cursor), and the body is wrapped with
`DisplayWidthWrapper` so that every continuation line starts at ``head_indent``.

Example:
    ```python
    from bulletlist.layout import hanging_indent
    from bulletlist.rendering.text import render_hanging

    layout = hanging_indent("1.", "A rather long item that wraps", 3)
    print("\\n".join(render_hanging(layout, 21)))
    # 1. A rather long item
    #    that wraps
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from yachalk import chalk

from bulletlist.config.logging import get_logger
from bulletlist.layout.hanging import hanging_indent
from bulletlist.layout.types import ContentAlignment, TextAlignment
from bulletlist.markers import marker_labels, marker_width
from bulletlist.rendering.width import DisplayWidthWrapper, center, display_width, pad_right

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bulletlist.config.logging import BulletListLogger
    from bulletlist.layout.types import HangingLayout, TabStop
    from bulletlist.markers import Marker
    from bulletlist.style import ListStyle

logger: BulletListLogger = get_logger(__name__)

# One column between a trailing bullet and the body.
TERMINAL_TRAILING_GAP: Final[float] = 1.0

BOX_TOP_LEFT: Final[str] = "┌"
BOX_TOP_RIGHT: Final[str] = "┐"
BOX_BOTTOM_LEFT: Final[str] = "└"
BOX_BOTTOM_RIGHT: Final[str] = "┘"
BOX_HORIZONTAL: Final[str] = "─"
BOX_VERTICAL: Final[str] = "│"


def _col(location: float) -> int:
    return max(0, int(round(location)))


def expand_tabs(text: str, tab_stops: Sequence[TabStop], start: int = 0) -> str:
    """Place the tab-separated segments of ``text`` on ``tab_stops``.

    Each tab moves to the first stop located right of the cursor. Left stops
    start the next segment there, right stops end it there and center stops
    center it there. A tab without such a stop becomes a single space.

    Args:
        text (str): Single line of text with tab separators.
        tab_stops (Sequence[TabStop]): Stops, in increasing order of location.
        start (int): Column where the line starts.

    Returns:
        str: The line with tabs replaced by spaces, including the leading indent.
    """
    segments = text.split("\t")
    parts: list[str] = [" " * start, segments[0]]
    col = start + display_width(segments[0])

    for seg in segments[1:]:
        seg_width = display_width(seg)
        stop = next((s for s in tab_stops if _col(s.location) > col), None)
        if stop is None:
            pos = col + 1
        elif stop.alignment is TextAlignment.RIGHT:
            pos = max(col, _col(stop.location) - seg_width)
        elif stop.alignment is TextAlignment.CENTER:
            pos = max(col, _col(stop.location) - seg_width // 2)
        else:
            pos = _col(stop.location)
        parts.append(" " * (pos - col))
        parts.append(seg)
        col = pos + seg_width
    return "".join(parts)


def render_hanging(
    layout: HangingLayout,
    width: int,
    *,
    content_alignment: ContentAlignment = ContentAlignment.LEADING,
) -> list[str]:
    """Render one hanging paragraph into lines of at most ``width`` columns.

    The bullet line starts at the paragraph's first-line indent; the body
    starts at ``head_indent`` on every line. If the bullet leaves no room for
    the body, the body starts on the next line.

    Args:
        layout (HangingLayout): Composed bullet/body layout.
        width (int): Available columns.
        content_alignment (ContentAlignment): Body alignment within its column.

    Returns:
        list[str]: Rendered lines without trailing whitespace.
    """
    style = layout.paragraph_style
    head = _col(style.head_indent)
    body = layout.body.replace("\t", " ")
    prefix_text = layout.text[: len(layout.text) - len(layout.body)]

    if layout.bullet:
        prefix = expand_tabs(prefix_text, style.tab_stops, _col(style.first_line_start))
        prefix = pad_right(prefix, head)
    else:
        prefix = " " * head
    body_start = display_width(prefix)
    avail = max(1, width - head)

    def align(line: str, room: int) -> str:
        if content_alignment is ContentAlignment.CENTER:
            return center(line, room)
        return line

    lines: list[str] = []
    if body_start >= width:
        lines.append(prefix)
        wrapped = DisplayWidthWrapper(width=avail).wrap(body) or [""]
        lines.extend(" " * head + align(line, avail) for line in wrapped)
    else:
        offset = body_start - head
        wrapper = DisplayWidthWrapper(width=avail, initial_indent=" " * offset)
        wrapped = wrapper.wrap(body) or [" " * offset]
        lines.append(prefix + align(wrapped[0][offset:], width - body_start))
        lines.extend(" " * head + align(line, avail) for line in wrapped[1:])

    return [line.rstrip() for line in lines]


def bullet_column_width(labels: Sequence[str], bullet_width: int | None) -> int:
    """Return ``bullet_width`` or, when None, the widest label plus one column."""
    if bullet_width is not None:
        return bullet_width
    widest = marker_width(labels)
    return widest + 1 if widest else 0


def frame_lines(
    lines: Sequence[str],
    inner_width: int,
    style: ListStyle,
    *,
    color: bool = False,
) -> list[str]:
    """Apply padding, the optional border and the margin around ``lines``.

    Args:
        lines (Sequence[str]): Content lines.
        inner_width (int): Width of the content frame.
        style (ListStyle): Supplies padding, border and margin.
        color (bool): Color the border with chalk.

    Returns:
        list[str]: Framed lines.
    """
    pad = style.padding
    body_width = inner_width + pad.horizontal
    out: list[str] = [" " * body_width] * pad.top
    out.extend(" " * pad.left + pad_right(line, inner_width) + " " * pad.right for line in lines)
    out.extend([" " * body_width] * pad.bottom)

    if style.show_border:

        def paint(s: str) -> str:
            return chalk.green(s) if color else s

        top = paint(BOX_TOP_LEFT + BOX_HORIZONTAL * body_width + BOX_TOP_RIGHT)
        bottom = paint(BOX_BOTTOM_LEFT + BOX_HORIZONTAL * body_width + BOX_BOTTOM_RIGHT)
        side = paint(BOX_VERTICAL)
        out = [top, *(side + line + side for line in out), bottom]
    else:
        out = [line.rstrip() for line in out]

    margin = style.margin
    left = " " * margin.left
    return [""] * margin.top + [(left + line) if line else line for line in out] + [
        ""
    ] * margin.bottom


def render_list(
    items: Sequence[str],
    style: ListStyle,
    *,
    marker: Marker | None = None,
    color: bool = False,
) -> list[str]:
    """Render ``items`` as a list.

    Args:
        items (Sequence[str]): Item texts.
        style (ListStyle): Rendering parameters; ``style.width`` is the total width.
        marker (Marker | None): Marker overriding the one described by ``style``.
        color (bool): Allow ANSI styling (border color).

    Returns:
        list[str]: Rendered lines.
    """
    marker = marker or style.build_marker()
    labels = marker_labels(marker, len(items))
    col_width = bullet_column_width(labels, style.bullet_width)

    chrome = style.margin.horizontal + 2 * style.border_width + style.padding.horizontal
    content_width = max(1, style.width - chrome)
    # Keep at least one body column inside the frame.
    col_width = min(col_width, content_width - 1)
    alignment = style.content_alignment if style.fill_width else ContentAlignment.LEADING
    logger.debug(
        "render_list: %d items, bullet column %d, content width %d",
        len(items),
        col_width,
        content_width,
    )

    lines: list[str] = []
    for idx, (label, item) in enumerate(zip(labels, items)):
        if idx:
            lines.extend([""] * style.item_spacing)
        layout = hanging_indent(
            label,
            item,
            col_width,
            style.bullet_alignment,
            trailing_gap=TERMINAL_TRAILING_GAP,
        )
        lines.extend(render_hanging(layout, content_width, content_alignment=alignment))

    inner_width = (
        content_width
        if style.fill_width
        else max((display_width(line) for line in lines), default=0)
    )
    return frame_lines(lines, inner_width, style, color=color)
