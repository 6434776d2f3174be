# topmark:header:start
#
#   project      : BulletList
#   file         : markers.py
#   file_relpath : src/bulletlist/markers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""List markers: the text shown in front of each list item.

A marker is any callable taking the zero-based item index and returning the
label for that item. The factories below cover the common list styles:

    >>> numeric_marker()(0)
    '1.'
    >>> numeric_marker(prefix="B.", suffix="")(1)
    'B.2'
    >>> roman_marker(start=15)(0)
    'XV.'
    >>> alpha_marker()(26)
    'aa.'

Markers are plain functions taking explicit parameters, so any callable with
the same signature (e.g. a lambda) can be used wherever a marker is expected.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Final

from bulletlist.core.enum_mixins import KeyedStrEnum
from bulletlist.rendering.width import display_width
from bulletlist.roman import roman_numeral_for

Marker = Callable[[int], str]

DEFAULT_BULLET: Final[str] = "•"


class MarkerKind(KeyedStrEnum):
    """Built-in marker styles."""

    NONE = ("none", "No marker", ("plain",))
    BULLET = ("bullet", "Bullet glyph", ("unordered", "glyph"))
    NUMERIC = ("numeric", "Decimal numbers", ("number", "decimal", "ordered"))
    ROMAN = ("roman", "Uppercase Roman numerals", ("upper_roman",))
    LOWER_ROMAN = ("lower-roman", "Lowercase Roman numerals", ())
    ALPHA = ("alpha", "Lowercase letters", ("letter", "lower_alpha"))
    UPPER_ALPHA = ("upper-alpha", "Uppercase letters", ("upper_letter",))


def no_marker() -> Marker:
    """Marker that renders nothing."""

    def _marker(_index: int) -> str:
        return ""

    return _marker


def bullet_marker(glyph: str = DEFAULT_BULLET) -> Marker:
    """Same glyph for every item."""

    def _marker(_index: int) -> str:
        return glyph

    return _marker


def numeric_marker(*, prefix: str = "", start: int = 1, suffix: str = ".") -> Marker:
    """Decimal ordinal, e.g. ``"1."``, ``"A.1."`` or ``"5."`` when ``start=5``."""

    def _marker(index: int) -> str:
        return f"{prefix}{index + start}{suffix}"

    return _marker


def roman_marker(
    *,
    prefix: str = "",
    start: int = 1,
    suffix: str = ".",
    lower: bool = False,
) -> Marker:
    """Roman numeral ordinal, e.g. ``"iv."``.

    Positions outside ``1..3999`` show the out-of-range text instead of failing,
    so a long list still renders.
    """

    def _marker(index: int) -> str:
        return f"{prefix}{roman_numeral_for(index + start, lower=lower)}{suffix}"

    return _marker


def to_letters(n: int, *, lower: bool = True) -> str:
    """Bijective base-26 letters: 1 -> a, 26 -> z, 27 -> aa. Empty for ``n < 1``."""
    if n < 1:
        return ""
    base = ord("a" if lower else "A")
    out = ""
    num = n - 1
    while num >= 0:
        out = chr(base + num % 26) + out
        num = num // 26 - 1
    return out


def alpha_marker(
    *,
    prefix: str = "",
    start: int = 1,
    suffix: str = ".",
    lower: bool = True,
) -> Marker:
    """Alphabetic ordinal, e.g. ``"a."``, ``"b."``, ..., ``"aa."``."""

    def _marker(index: int) -> str:
        return f"{prefix}{to_letters(index + start, lower=lower)}{suffix}"

    return _marker


def marker_for(
    kind: MarkerKind,
    *,
    glyph: str = DEFAULT_BULLET,
    prefix: str = "",
    start: int = 1,
    suffix: str = ".",
) -> Marker:
    """Return the marker for ``kind``; ``glyph`` only applies to bullets.

    Args:
        kind (MarkerKind): Marker style.
        glyph (str): Bullet glyph for `MarkerKind.BULLET`.
        prefix (str): Text before ordinal labels.
        start (int): Ordinal of the first item.
        suffix (str): Text after ordinal labels.

    Returns:
        Marker: The marker callable.
    """
    if kind is MarkerKind.NONE:
        return no_marker()
    if kind is MarkerKind.BULLET:
        return bullet_marker(glyph)
    if kind is MarkerKind.NUMERIC:
        return numeric_marker(prefix=prefix, start=start, suffix=suffix)
    if kind in (MarkerKind.ROMAN, MarkerKind.LOWER_ROMAN):
        return roman_marker(
            prefix=prefix, start=start, suffix=suffix, lower=kind is MarkerKind.LOWER_ROMAN
        )
    return alpha_marker(
        prefix=prefix, start=start, suffix=suffix, lower=kind is MarkerKind.ALPHA
    )


def marker_labels(marker: Marker, count: int) -> list[str]:
    """Labels for the first ``count`` items."""
    return [marker(i) for i in range(count)]


def marker_width(labels: Iterable[str]) -> int:
    """Widest display width among ``labels`` (0 when empty)."""
    return max((display_width(label) for label in labels), default=0)
