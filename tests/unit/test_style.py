# topmark:header:start
#
#   project      : BulletList
#   file         : test_style.py
#   file_relpath : tests/unit/test_style.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for `bulletlist.style` (frozen style and its mutable builder)."""

from __future__ import annotations

import dataclasses
import math

import pytest
import tomlkit

from bulletlist.core.diagnostics import DiagnosticLevel, DiagnosticLog
from bulletlist.layout import BulletAlignment, ContentAlignment, Insets
from bulletlist.markers import MarkerKind
from bulletlist.style import DEFAULT_WIDTH, ListStyle, MutableListStyle
from tests.conftest import make_style


def test_defaults() -> None:
    style = ListStyle()
    assert style.item_spacing == 0
    assert style.marker is MarkerKind.BULLET
    assert style.bullet == "•"
    assert style.bullet_width is None
    assert style.bullet_alignment is BulletAlignment.LEADING
    assert style.show_border is False
    assert style.fill_width is True
    assert style.content_alignment is ContentAlignment.LEADING
    assert style.padding == Insets()
    assert style.margin == Insets()
    assert style.width == DEFAULT_WIDTH


def test_derived_properties() -> None:
    assert ListStyle().border_width == 0
    assert make_style(show_border=True).border_width == 1
    assert ListStyle().content_max_width == math.inf
    assert make_style(fill_width=False).content_max_width is None


def test_frozen() -> None:
    style = ListStyle()
    with pytest.raises(dataclasses.FrozenInstanceError):
        style.width = 10  # type: ignore[misc]


def test_merge_is_last_wins_and_skips_none() -> None:
    base = MutableListStyle(item_spacing=1, bullet="*", show_border=True)
    over = MutableListStyle(bullet="-", show_border=None, width=40)

    merged = base.merge_with(over)

    assert merged.item_spacing == 1
    assert merged.bullet == "-"
    assert merged.show_border is True
    assert merged.width == 40
    # inputs untouched
    assert base.bullet == "*"


def test_resolve_and_freeze() -> None:
    base = make_style(width=30, marker=MarkerKind.ROMAN)
    style = MutableListStyle(item_spacing=2).resolve(base)
    assert style.item_spacing == 2
    assert style.width == 30
    assert style.marker is MarkerKind.ROMAN

    assert MutableListStyle().freeze() == ListStyle()


def test_thaw_freeze_round_trip() -> None:
    style = make_style(
        marker=MarkerKind.NUMERIC,
        prefix="B.",
        bullet_width=8,
        padding=Insets.all(1),
        content_alignment=ContentAlignment.CENTER,
    )
    assert style.thaw().freeze() == style


def test_build_marker() -> None:
    marker = make_style(marker=MarkerKind.NUMERIC, prefix="A.", start=3, suffix="").build_marker()
    assert marker(0) == "A.3"
    assert make_style(bullet="😀").build_marker()(4) == "😀"


def test_from_toml_table() -> None:
    diags = DiagnosticLog()
    built = MutableListStyle.from_toml_table(
        {
            "marker": "roman",
            "bullet_width": 5,
            "bullet_alignment": "right",
            "item_spacing": 1,
            "show_border": True,
            "padding": 1,
            "margin": {"left": 2},
            "start": -3,
        },
        diagnostics=diags,
    )

    assert len(diags) == 0
    assert built.marker is MarkerKind.ROMAN
    assert built.bullet_width == 5
    assert built.bullet_alignment is BulletAlignment.TRAILING
    assert built.item_spacing == 1
    assert built.show_border is True
    assert built.padding == Insets.all(1)
    assert built.margin == Insets(left=2)
    assert built.start == -3
    assert built.fill_width is None


def test_from_toml_table_reports_bad_values() -> None:
    diags = DiagnosticLog()
    built = MutableListStyle.from_toml_table(
        {
            "marker": "hexagonal",
            "item_spacing": -1,
            "show_border": "yes",
            "padding": {"middle": 1},
            "width": 0,
            "colour": "red",
        },
        diagnostics=diags,
    )

    assert built == MutableListStyle()
    assert len(diags) == 6
    assert all(d.level is DiagnosticLevel.WARNING for d in diags)
    messages = "\n".join(d.message for d in diags)
    assert "Unknown key" in messages
    assert "'colour'" in messages
    assert "hexagonal" in messages


def test_from_toml_table_empty() -> None:
    assert MutableListStyle.from_toml_table(None) == MutableListStyle()
    assert MutableListStyle.from_toml_table({}) == MutableListStyle()


def test_to_toml_table_only_set_keys() -> None:
    table = MutableListStyle(marker=MarkerKind.LOWER_ROMAN, margin=Insets(left=1)).to_toml_table()
    assert table == {
        "marker": "lower-roman",
        "margin": {"top": 0, "right": 0, "bottom": 0, "left": 1},
    }


def test_toml_round_trip_through_tomlkit() -> None:
    style = make_style(
        marker=MarkerKind.UPPER_ALPHA,
        bullet_alignment=BulletAlignment.TRAILING,
        padding=Insets(top=1, left=2),
        prefix="",
    )
    text = tomlkit.dumps({"style": style.to_toml_table()})
    parsed = tomlkit.parse(text).unwrap()["style"]

    diags = DiagnosticLog()
    again = MutableListStyle.from_toml_table(parsed, diagnostics=diags).freeze()

    assert len(diags) == 0
    assert again == style
