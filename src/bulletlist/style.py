# topmark:header:start
#
#   project      : BulletList
#   file         : style.py
#   file_relpath : src/bulletlist/style.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""List rendering parameters.

This module defines:
    - `ListStyle`: an immutable snapshot of everything a list render needs
      (spacing, marker, bullet column, border, content frame, insets).
    - `MutableListStyle`: a builder with tri-state fields used while merging
      configuration sources; ``None`` means "inherit".

Merging follows a last-wins policy: defaults → ``pyproject.toml`` →
``bulletlist.toml`` → ``--config`` files → CLI options. Use
`MutableListStyle.freeze` to obtain a `ListStyle` and `ListStyle.thaw` to
go back for edits.

TOML mapping:

    [style]
    marker = "roman"
    bullet_width = 5
    bullet_alignment = "trailing"
    item_spacing = 1
    show_border = true
    padding = 1
    margin = { left = 2, right = 2 }
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

from bulletlist.config.getters import (
    get_bool_value_or_none_checked,
    get_enum_value_checked,
    get_insets_value_checked,
    get_int_value_or_none_checked,
    get_string_value_or_none_checked,
)
from bulletlist.config.keys import Toml
from bulletlist.config.logging import get_logger
from bulletlist.core.diagnostics import DiagnosticLog
from bulletlist.layout.insets import Insets
from bulletlist.layout.types import BulletAlignment, ContentAlignment
from bulletlist.markers import DEFAULT_BULLET, MarkerKind, marker_for

if TYPE_CHECKING:
    from collections.abc import Mapping

    from bulletlist.config.logging import BulletListLogger
    from bulletlist.markers import Marker

logger: BulletListLogger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_WIDTH: int = 72


@dataclass(frozen=True, slots=True)
class ListStyle:
    """Immutable list rendering parameters.

    Attributes:
        item_spacing (int): Blank lines between items.
        marker (MarkerKind): Marker style for the item labels.
        bullet (str): Glyph used when ``marker`` is `MarkerKind.BULLET`.
        prefix (str): Text before ordinal labels (``"B."`` gives ``"B.1"``).
        start (int): Ordinal of the first item.
        suffix (str): Text after ordinal labels.
        bullet_width (int | None): Width of the bullet column; None sizes it
            to the widest label plus one column.
        bullet_alignment (BulletAlignment): Bullet placement in its column.
        show_border (bool): Draw a box around the list.
        fill_width (bool): Let the content frame take all available width
            instead of shrinking to the text.
        content_alignment (ContentAlignment): Body text alignment inside its
            frame; only visible when ``fill_width`` is set.
        padding (Insets): Space between the border and the content.
        margin (Insets): Space outside the border.
        width (int): Total width available to the list, margins included.
    """

    item_spacing: int = 0
    marker: MarkerKind = MarkerKind.BULLET
    bullet: str = DEFAULT_BULLET
    prefix: str = ""
    start: int = 1
    suffix: str = "."
    bullet_width: int | None = None
    bullet_alignment: BulletAlignment = BulletAlignment.LEADING
    show_border: bool = False
    fill_width: bool = True
    content_alignment: ContentAlignment = ContentAlignment.LEADING
    padding: Insets = field(default_factory=Insets)
    margin: Insets = field(default_factory=Insets)
    width: int = DEFAULT_WIDTH

    @property
    def border_width(self) -> int:
        """Border thickness in columns: 1 with a border, else 0."""
        return 1 if self.show_border else 0

    @property
    def content_max_width(self) -> float | None:
        """``math.inf`` when the frame fills the available width, else None (natural)."""
        return math.inf if self.fill_width else None

    def build_marker(self) -> Marker:
        """Return the marker callable described by this style."""
        return marker_for(
            self.marker,
            glyph=self.bullet,
            prefix=self.prefix,
            start=self.start,
            suffix=self.suffix,
        )

    def thaw(self) -> MutableListStyle:
        """Return a mutable builder initialized from this style."""
        return MutableListStyle(
            item_spacing=self.item_spacing,
            marker=self.marker,
            bullet=self.bullet,
            prefix=self.prefix,
            start=self.start,
            suffix=self.suffix,
            bullet_width=self.bullet_width,
            bullet_alignment=self.bullet_alignment,
            show_border=self.show_border,
            fill_width=self.fill_width,
            content_alignment=self.content_alignment,
            padding=self.padding,
            margin=self.margin,
            width=self.width,
        )

    def to_toml_table(self) -> dict[str, Any]:
        """Serialize to a TOML-friendly ``[style]`` table (``bullet_width`` omitted when unset)."""
        return self.thaw().to_toml_table()


@dataclass
class MutableListStyle:
    """Mutable builder for `ListStyle`; every field is tri-state.

    ``None`` means "inherit from the layer below". Note that ``bullet_width``
    cannot be reset to "natural" by a higher layer once a lower layer set it;
    use ``bullet_width = 0`` for the narrowest column instead.
    """

    item_spacing: int | None = None
    marker: MarkerKind | None = None
    bullet: str | None = None
    prefix: str | None = None
    start: int | None = None
    suffix: str | None = None
    bullet_width: int | None = None
    bullet_alignment: BulletAlignment | None = None
    show_border: bool | None = None
    fill_width: bool | None = None
    content_alignment: ContentAlignment | None = None
    padding: Insets | None = None
    margin: Insets | None = None
    width: int | None = None

    def merge_with(self, other: MutableListStyle) -> MutableListStyle:
        """Return a new builder applying ``other`` over ``self`` (last-wins).

        ``None`` fields in ``other`` do not override explicit values in ``self``.
        """

        def pick(current: T | None, override: T | None) -> T | None:
            return override if override is not None else current

        return MutableListStyle(
            item_spacing=pick(self.item_spacing, other.item_spacing),
            marker=pick(self.marker, other.marker),
            bullet=pick(self.bullet, other.bullet),
            prefix=pick(self.prefix, other.prefix),
            start=pick(self.start, other.start),
            suffix=pick(self.suffix, other.suffix),
            bullet_width=pick(self.bullet_width, other.bullet_width),
            bullet_alignment=pick(self.bullet_alignment, other.bullet_alignment),
            show_border=pick(self.show_border, other.show_border),
            fill_width=pick(self.fill_width, other.fill_width),
            content_alignment=pick(self.content_alignment, other.content_alignment),
            padding=pick(self.padding, other.padding),
            margin=pick(self.margin, other.margin),
            width=pick(self.width, other.width),
        )

    def resolve(self, base: ListStyle) -> ListStyle:
        """Fill unset fields from ``base`` and return a frozen `ListStyle`."""

        def pick(value: T | None, fallback: T) -> T:
            return fallback if value is None else value

        return ListStyle(
            item_spacing=pick(self.item_spacing, base.item_spacing),
            marker=pick(self.marker, base.marker),
            bullet=pick(self.bullet, base.bullet),
            prefix=pick(self.prefix, base.prefix),
            start=pick(self.start, base.start),
            suffix=pick(self.suffix, base.suffix),
            bullet_width=pick(self.bullet_width, base.bullet_width),
            bullet_alignment=pick(self.bullet_alignment, base.bullet_alignment),
            show_border=pick(self.show_border, base.show_border),
            fill_width=pick(self.fill_width, base.fill_width),
            content_alignment=pick(self.content_alignment, base.content_alignment),
            padding=pick(self.padding, base.padding),
            margin=pick(self.margin, base.margin),
            width=pick(self.width, base.width),
        )

    def freeze(self) -> ListStyle:
        """Freeze against the built-in defaults."""
        return self.resolve(ListStyle())

    @classmethod
    def from_toml_table(
        cls,
        tbl: Mapping[str, Any] | None,
        *,
        where: str = f"[{Toml.SECTION_STYLE}]",
        diagnostics: DiagnosticLog | None = None,
    ) -> MutableListStyle:
        """Create a builder from a ``[style]`` table.

        Invalid values are reported to ``diagnostics`` (and logged) and left unset;
        unknown keys are reported and ignored.

        Args:
            tbl (Mapping[str, Any] | None): The table; None or empty yields an empty builder.
            where (str): TOML location used in messages.
            diagnostics (DiagnosticLog | None): Sink for warnings.

        Returns:
            MutableListStyle: Parsed builder.
        """
        diags = diagnostics if diagnostics is not None else DiagnosticLog()
        if not tbl:
            return cls()
        table = dict(tbl)

        known = {
            value
            for name, value in vars(Toml).items()
            if name.startswith("KEY_") and isinstance(value, str)
        }
        for key in sorted(set(table) - known):
            logger.warning("Unknown key in %s: %r", where, key)
            diags.add_warning(f"Unknown key in {where}: {key!r}")

        common: dict[str, Any] = {"where": where, "diagnostics": diags, "logger": logger}
        return cls(
            item_spacing=get_int_value_or_none_checked(table, Toml.KEY_ITEM_SPACING, **common),
            marker=get_enum_value_checked(table, Toml.KEY_MARKER, MarkerKind, **common),
            bullet=get_string_value_or_none_checked(table, Toml.KEY_BULLET, **common),
            prefix=get_string_value_or_none_checked(table, Toml.KEY_MARKER_PREFIX, **common),
            start=get_int_value_or_none_checked(
                table, Toml.KEY_MARKER_START, minimum=None, **common
            ),
            suffix=get_string_value_or_none_checked(table, Toml.KEY_MARKER_SUFFIX, **common),
            bullet_width=get_int_value_or_none_checked(table, Toml.KEY_BULLET_WIDTH, **common),
            bullet_alignment=get_enum_value_checked(
                table, Toml.KEY_BULLET_ALIGNMENT, BulletAlignment, **common
            ),
            show_border=get_bool_value_or_none_checked(table, Toml.KEY_SHOW_BORDER, **common),
            fill_width=get_bool_value_or_none_checked(table, Toml.KEY_FILL_WIDTH, **common),
            content_alignment=get_enum_value_checked(
                table, Toml.KEY_CONTENT_ALIGNMENT, ContentAlignment, **common
            ),
            padding=get_insets_value_checked(table, Toml.KEY_PADDING, **common),
            margin=get_insets_value_checked(table, Toml.KEY_MARGIN, **common),
            width=get_int_value_or_none_checked(table, Toml.KEY_WIDTH, minimum=1, **common),
        )

    def to_toml_table(self) -> dict[str, Any]:
        """Serialize only explicitly set keys to a TOML-friendly dict."""
        out: dict[str, Any] = {}

        def put(key: str, value: object) -> None:
            if value is None:
                return
            if isinstance(value, Insets):
                out[key] = value.to_dict()
            elif isinstance(value, (MarkerKind, BulletAlignment, ContentAlignment)):
                out[key] = value.key
            else:
                out[key] = value

        put(Toml.KEY_ITEM_SPACING, self.item_spacing)
        put(Toml.KEY_MARKER, self.marker)
        put(Toml.KEY_BULLET, self.bullet)
        put(Toml.KEY_MARKER_PREFIX, self.prefix)
        put(Toml.KEY_MARKER_START, self.start)
        put(Toml.KEY_MARKER_SUFFIX, self.suffix)
        put(Toml.KEY_BULLET_WIDTH, self.bullet_width)
        put(Toml.KEY_BULLET_ALIGNMENT, self.bullet_alignment)
        put(Toml.KEY_SHOW_BORDER, self.show_border)
        put(Toml.KEY_FILL_WIDTH, self.fill_width)
        put(Toml.KEY_CONTENT_ALIGNMENT, self.content_alignment)
        put(Toml.KEY_PADDING, self.padding)
        put(Toml.KEY_MARGIN, self.margin)
        put(Toml.KEY_WIDTH, self.width)
        return out
