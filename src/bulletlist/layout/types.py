# topmark:header:start
#
#   project      : BulletList
#   file         : types.py
#   file_relpath : src/bulletlist/layout/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value types describing a hanging paragraph.

These mirror the paragraph-style attributes a text engine consumes:

- `TabStop`: an aligned horizontal position on a line.
- `ParagraphStyle`: head indent, first-line head indent and tab stops.
- `HangingLayout`: the composed, tab-separated text plus its paragraph style.

Distances are plain floats in whatever unit the consumer uses (points for a
GUI text engine, character columns for the terminal renderer).
"""

from __future__ import annotations

from dataclasses import dataclass

from bulletlist.core.enum_mixins import KeyedStrEnum


class BulletAlignment(KeyedStrEnum):
    """Placement of the bullet within its fixed-width column."""

    LEADING = ("leading", "Bullet flush with the leading edge", ("left", "start"))
    TRAILING = ("trailing", "Bullet flush against the body text", ("right", "end"))


class TextAlignment(KeyedStrEnum):
    """How text following a tab is aligned on its tab stop."""

    LEFT = ("left", "Text starts at the stop", ("leading", "natural"))
    RIGHT = ("right", "Text ends at the stop", ("trailing",))
    CENTER = ("center", "Text is centered on the stop", ("centre",))


class ContentAlignment(KeyedStrEnum):
    """Alignment of body text inside its frame."""

    LEADING = ("leading", "Flush left", ("left",))
    CENTER = ("center", "Centered", ("centre",))


@dataclass(frozen=True, slots=True)
class TabStop:
    """A tab stop at ``location`` with the given text alignment."""

    alignment: TextAlignment
    location: float


@dataclass(frozen=True, slots=True)
class ParagraphStyle:
    """Indentation and tab stops for one paragraph.

    Attributes:
        head_indent (float): Left edge of every line except the first.
        first_line_head_indent (float): Offset of the first line relative to
            ``head_indent``; the first line starts at
            ``head_indent + first_line_head_indent``.
        tab_stops (tuple[TabStop, ...]): Tab stops in increasing order of location.
    """

    head_indent: float = 0.0
    first_line_head_indent: float = 0.0
    tab_stops: tuple[TabStop, ...] = ()

    @property
    def first_line_start(self) -> float:
        """Absolute left edge of the first line."""
        return self.head_indent + self.first_line_head_indent


@dataclass(frozen=True, slots=True)
class HangingLayout:
    """A bullet/body pair composed as a single tab-separated paragraph.

    Attributes:
        text (str): Composed text; the bullet and body are separated by a tab
            (and preceded by one for trailing alignment).
        paragraph_style (ParagraphStyle): Style that produces the hanging effect.
        bullet (str): The bullet as given, tabs included.
        body (str): The body as given; tabs are kept verbatim.
        alignment (BulletAlignment): Alignment the layout was computed for.
    """

    text: str
    paragraph_style: ParagraphStyle
    bullet: str
    body: str
    alignment: BulletAlignment = BulletAlignment.LEADING

    @property
    def segments(self) -> list[str]:
        """Tab-separated segments of `text` (leading empty segment included)."""
        return self.text.split("\t")

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly representation."""
        style = self.paragraph_style
        return {
            "text": self.text,
            "alignment": self.alignment.key,
            "head_indent": style.head_indent,
            "first_line_head_indent": style.first_line_head_indent,
            "tab_stops": [
                {"alignment": stop.alignment.key, "location": stop.location}
                for stop in style.tab_stops
            ],
        }
