# topmark:header:start
#
#   project      : BulletList
#   file         : gallery.py
#   file_relpath : src/bulletlist/gallery.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Catalog of demonstration pages.

Each `Page` is a titled sequence of `Section`s; each section renders the same
items with its own marker and bullet column. Section styles are partial
(`MutableListStyle`) and are resolved over the caller's base style, so
display toggles such as the border or the total width apply to every section.

Bullet column widths were designed in typographic points; `points()`
converts them to terminal columns.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from bulletlist.config.logging import get_logger
from bulletlist.layout.types import BulletAlignment
from bulletlist.markers import MarkerKind
from bulletlist.rendering.headings import render_heading
from bulletlist.rendering.text import render_list
from bulletlist.style import ListStyle, MutableListStyle

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bulletlist.config.logging import BulletListLogger

logger: BulletListLogger = get_logger(__name__)

POINTS_PER_COLUMN: Final[float] = 5.0

HAPPY_FACE: Final[str] = "\U0001f600"
STAR: Final[str] = "⭐️"


def _normalize(name: str) -> str:
    return " ".join(name.replace("-", " ").replace("_", " ").lower().split())


def points(pt: float) -> int:
    """Convert a width in points to terminal columns (rounded up)."""
    return math.ceil(pt / POINTS_PER_COLUMN)


@dataclass(frozen=True)
class Section:
    """One titled list within a page.

    Attributes:
        title (str): Section heading.
        style (MutableListStyle): Partial style applied over the page's base style.
    """

    title: str
    style: MutableListStyle = field(default_factory=MutableListStyle)


@dataclass(frozen=True)
class Page:
    """A named demonstration page."""

    name: str
    sections: tuple[Section, ...]
    description: str = ""

    @property
    def slug(self) -> str:
        """Command-line friendly name (``"roman-numeral-list"``)."""
        return _normalize(self.name).replace(" ", "-")


def _unaligned(glyph: str) -> MutableListStyle:
    # A zero-width column puts one space after the bullet and wraps to the edge.
    return MutableListStyle(marker=MarkerKind.BULLET, bullet=glyph, bullet_width=0)


PAGES: Final[tuple[Page, ...]] = (
    Page(
        name="Simple List",
        description="Items with and without a bullet, no hanging indent.",
        sections=(
            Section("Basic", MutableListStyle(marker=MarkerKind.NONE)),
            Section("With a bullet", _unaligned("•")),
            Section("With a happy face bullet", _unaligned(HAPPY_FACE)),
        ),
    ),
    Page(
        name="Real Bullet List",
        description="Bullets in their own column; wrapped lines align with the text.",
        sections=(
            Section("Properly aligned", MutableListStyle(marker=MarkerKind.BULLET)),
            Section(
                "Bullet width 20",
                MutableListStyle(marker=MarkerKind.BULLET, bullet_width=points(20)),
            ),
            Section(
                "Double happy face",
                MutableListStyle(
                    marker=MarkerKind.BULLET,
                    bullet=HAPPY_FACE * 2,
                    bullet_width=points(50),
                ),
            ),
            Section(
                "Right align bullet",
                MutableListStyle(
                    marker=MarkerKind.BULLET,
                    bullet=STAR,
                    bullet_width=points(40),
                    bullet_alignment=BulletAlignment.TRAILING,
                ),
            ),
        ),
    ),
    Page(
        name="Ordered List",
        description="Numbered items.",
        sections=(
            Section("Numeric list", MutableListStyle(marker=MarkerKind.NUMERIC)),
            Section(
                "Bullet width 25",
                MutableListStyle(marker=MarkerKind.NUMERIC, bullet_width=points(25)),
            ),
            Section(
                "Multi-level",
                MutableListStyle(
                    marker=MarkerKind.NUMERIC,
                    prefix="B.",
                    suffix="",
                    bullet_width=points(40),
                ),
            ),
            Section(
                "Different start",
                MutableListStyle(marker=MarkerKind.NUMERIC, start=5, bullet_width=points(40)),
            ),
        ),
    ),
    Page(
        name="Roman Numeral List",
        description="Items numbered with Roman numerals.",
        sections=(
            Section(
                "Roman numerals",
                MutableListStyle(marker=MarkerKind.ROMAN, bullet_width=points(40)),
            ),
            Section(
                "Trailing alignment",
                MutableListStyle(
                    marker=MarkerKind.ROMAN,
                    bullet_width=points(40),
                    bullet_alignment=BulletAlignment.TRAILING,
                ),
            ),
            Section(
                "Start at 15",
                MutableListStyle(
                    marker=MarkerKind.ROMAN,
                    start=15,
                    bullet_width=points(40),
                    bullet_alignment=BulletAlignment.TRAILING,
                ),
            ),
        ),
    ),
    Page(
        name="Ultimate List",
        description="One of each.",
        sections=(
            Section("Default bullet", MutableListStyle(marker=MarkerKind.BULLET)),
            Section("Happy face", MutableListStyle(marker=MarkerKind.BULLET, bullet=HAPPY_FACE)),
            Section(
                "Ordered",
                MutableListStyle(marker=MarkerKind.NUMERIC, bullet_width=points(40)),
            ),
            Section(
                "Right aligned Roman numerals",
                MutableListStyle(
                    marker=MarkerKind.ROMAN,
                    bullet_width=points(40),
                    bullet_alignment=BulletAlignment.TRAILING,
                ),
            ),
        ),
    ),
    Page(
        name="Master Page",
        description="Every list style on a single page.",
        sections=(
            Section("Simple list", MutableListStyle(marker=MarkerKind.NONE)),
            Section("Simple bullet list", _unaligned("•")),
            Section("Simple happy face list", _unaligned(HAPPY_FACE)),
            Section(
                "Aligned bullet list",
                MutableListStyle(marker=MarkerKind.BULLET, bullet_width=points(25)),
            ),
            Section(
                "Aligned double happy face list",
                MutableListStyle(
                    marker=MarkerKind.BULLET,
                    bullet=HAPPY_FACE * 2,
                    bullet_width=points(50),
                ),
            ),
            Section(
                "Numeric list",
                MutableListStyle(
                    marker=MarkerKind.NUMERIC,
                    prefix="A.",
                    bullet_width=points(30),
                ),
            ),
            Section(
                "Roman numeral list",
                MutableListStyle(marker=MarkerKind.ROMAN, bullet_width=points(40)),
            ),
            Section(
                "Trailing Roman numeral list",
                MutableListStyle(
                    marker=MarkerKind.ROMAN,
                    bullet_width=points(40),
                    bullet_alignment=BulletAlignment.TRAILING,
                ),
            ),
        ),
    ),
)


def list_pages() -> list[Page]:
    """Return the pages in display order."""
    return list(PAGES)


def get_page(name: str) -> Page:
    """Look up a page by name or slug, ignoring case.

    Args:
        name (str): ``"Roman Numeral List"``, ``"roman-numeral-list"``, ...

    Returns:
        Page: The matching page.

    Raises:
        KeyError: If no page matches.
    """
    token = _normalize(name)
    for page in PAGES:
        if token == _normalize(page.name):
            return page
    raise KeyError(name)


def render_page(
    page: Page,
    items: Sequence[str],
    base_style: ListStyle | None = None,
    *,
    color: bool = False,
) -> list[str]:
    """Render every section of ``page`` with ``items``.

    Args:
        page (Page): Page to render.
        items (Sequence[str]): Item texts shared by all sections.
        base_style (ListStyle | None): Style under each section's overrides.
        color (bool): Allow ANSI styling.

    Returns:
        list[str]: Rendered lines, headings included.
    """
    base = base_style if base_style is not None else ListStyle()
    logger.debug("Rendering page %r with %d items", page.name, len(items))
    lines = render_heading(page.name, 1, color=color)
    for section in page.sections:
        lines.extend(render_heading(section.title, 2, color=color))
        lines.extend(render_list(items, section.style.resolve(base), color=color))
    return lines
