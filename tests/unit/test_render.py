# topmark:header:start
#
#   project      : BulletList
#   file         : test_render.py
#   file_relpath : tests/unit/test_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the terminal renderer (`bulletlist.rendering`)."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bulletlist.layout import BulletAlignment, ContentAlignment, Insets, TabStop, TextAlignment
from bulletlist.layout.hanging import hanging_indent
from bulletlist.markers import MarkerKind
from bulletlist.rendering.headings import HeadingLevel, render_heading
from bulletlist.rendering.text import expand_tabs, render_hanging, render_list
from bulletlist.rendering.width import (
    DisplayWidthWrapper,
    center,
    display_width,
    pad_left,
    pad_right,
)
from tests.conftest import make_style, parametrize


@parametrize(
    "text, expected",
    [("abc", 3), ("😀", 2), ("e\u0301", 1), ("⭐️", 2), ("漢字", 4), ("a\u200bb", 2), ("", 0)],
)
def test_display_width(text: str, expected: int) -> None:
    assert display_width(text) == expected


def test_padding_helpers() -> None:
    assert pad_right("😀", 4) == "😀  "
    assert pad_left("ab", 4) == "  ab"
    assert center("ab", 7) == "  ab   "
    assert pad_right("abcdef", 3) == "abcdef"


def test_expand_tabs_left_right_center() -> None:
    left = (TabStop(TextAlignment.LEFT, 3.0),)
    assert expand_tabs("•\tbody", left) == "•  body"

    trailing = (TabStop(TextAlignment.RIGHT, 4.0), TabStop(TextAlignment.LEFT, 5.0))
    assert expand_tabs("\tIV.\tx", trailing) == " IV. x"

    assert expand_tabs("\tab", (TabStop(TextAlignment.CENTER, 4.0),)) == "   ab"


def test_expand_tabs_without_stop_uses_one_space() -> None:
    assert expand_tabs("a\tb", (), 2) == "  a b"
    assert expand_tabs("long\tb", (TabStop(TextAlignment.LEFT, 2.0),)) == "long b"


def test_render_hanging_wraps_under_body() -> None:
    layout = hanging_indent("1.", "A rather long item that wraps", 3)
    assert render_hanging(layout, 21) == ["1. A rather long item", "   that wraps"]
    assert render_hanging(layout, 20) == ["1. A rather long", "   item that wraps"]


def test_render_hanging_wide_bullet_pushes_body() -> None:
    layout = hanging_indent("XVIII.", "alpha beta gamma", 5)
    assert render_hanging(layout, 20) == ["XVIII. alpha beta", "     gamma"]


def test_render_hanging_bullet_fills_line() -> None:
    layout = hanging_indent("LONGBULLET", "body", 3)
    assert render_hanging(layout, 8) == ["LONGBULLET", "   body"]


def test_render_hanging_unaligned_bullet() -> None:
    layout = hanging_indent("•", "one two three four", 0)
    assert render_hanging(layout, 10) == ["• one two", "three four"]


def test_render_hanging_measures_wide_text_in_columns() -> None:
    layout = hanging_indent("•", "日本語のテキストはとても長いです 日本語のテキスト", 2)
    lines = render_hanging(layout, 20)

    assert lines == ["• 日本語のテキストは", "  とても長いです", "  日本語のテキスト"]
    assert all(display_width(line) <= 20 for line in lines)


def test_display_width_wrapper_breaks_between_wide_characters() -> None:
    wrapper = DisplayWidthWrapper(width=5)
    assert wrapper.wrap("日本語テキスト") == ["日本", "語テ", "キス", "ト"]
    assert wrapper.wrap("ab 日本 c") == ["ab", "日本", "c"]
    assert DisplayWidthWrapper(width=1).wrap("日本") == ["日", "本"]


@given(
    words=st.lists(
        st.text(alphabet="abcxyz日本😀", min_size=1, max_size=8), min_size=1, max_size=30
    ),
    bullet_width=st.integers(min_value=2, max_value=6),
    extra=st.integers(min_value=5, max_value=50),
)
def test_wrapped_lines_start_at_head_indent(
    words: list[str], bullet_width: int, extra: int
) -> None:
    width = bullet_width + extra
    layout = hanging_indent("•", " ".join(words), bullet_width)
    lines = render_hanging(layout, width)

    assert lines[0].startswith("•" + " " * (bullet_width - 1))
    assert lines[0][bullet_width] != " "
    for line in lines[1:]:
        assert line[:bullet_width] == " " * bullet_width
        assert line[bullet_width] != " "
    assert all(display_width(line) <= width for line in lines)


def test_render_list_natural_bullet_column() -> None:
    items = ["Short item", "Long item. With a few more words"]
    assert render_list(items, make_style(width=24)) == [
        "• Short item",
        "• Long item. With a few",
        "  more words",
    ]


def test_render_list_item_spacing() -> None:
    lines = render_list(["a", "b"], make_style(item_spacing=1, width=20))
    assert lines == ["• a", "", "• b"]


def test_render_list_trailing_roman() -> None:
    style = make_style(marker=MarkerKind.ROMAN, bullet_alignment=BulletAlignment.TRAILING)
    assert render_list(["a", "b", "c", "d"], style) == [
        "  I. a",
        " II. b",
        "III. c",
        " IV. d",
    ]


def test_render_list_marker_argument_overrides_style() -> None:
    lines = render_list(["x", "y"], make_style(), marker=lambda i: f"[{i}]")
    assert lines == ["[0] x", "[1] y"]


def test_render_list_border_fill() -> None:
    style = make_style(marker=MarkerKind.NUMERIC, show_border=True, width=16)
    assert render_list(["a", "b"], style) == [
        "┌" + "─" * 14 + "┐",
        "│1. a          │",
        "│2. b          │",
        "└" + "─" * 14 + "┘",
    ]


def test_render_list_border_shrinks_without_fill() -> None:
    style = make_style(
        marker=MarkerKind.NUMERIC,
        show_border=True,
        fill_width=False,
        padding=Insets.all(1),
    )
    assert render_list(["a", "b"], style) == [
        "┌──────┐",
        "│      │",
        "│ 1. a │",
        "│ 2. b │",
        "│      │",
        "└──────┘",
    ]


def test_render_list_border_holds_wide_characters() -> None:
    lines = render_list(["😀" * 14], make_style(show_border=True, width=24))
    assert lines == [
        "┌" + "─" * 22 + "┐",
        "│• " + "😀" * 10 + "│",
        "│  " + "😀" * 4 + " " * 12 + "│",
        "└" + "─" * 22 + "┘",
    ]
    assert {display_width(line) for line in lines} == {24}


def test_render_list_bullet_column_wider_than_content() -> None:
    lines = render_list(["h"], make_style(show_border=True, width=6, bullet_width=8))
    assert lines == ["┌────┐", "│•  h│", "└────┘"]


def test_render_list_margin() -> None:
    style = make_style(
        marker=MarkerKind.NUMERIC,
        fill_width=False,
        margin=Insets(top=1, left=2, bottom=1),
    )
    assert render_list(["a", "b"], style) == ["", "  1. a", "  2. b", ""]


def test_render_list_center_only_when_filling() -> None:
    centered = make_style(
        marker=MarkerKind.NONE, content_alignment=ContentAlignment.CENTER, width=12
    )
    assert render_list(["ab"], centered) == ["     ab"]

    natural = make_style(
        marker=MarkerKind.NONE,
        content_alignment=ContentAlignment.CENTER,
        fill_width=False,
        width=12,
    )
    assert render_list(["ab"], natural) == ["ab"]


def test_render_list_empty() -> None:
    assert render_list([], make_style()) == []


def test_headings() -> None:
    assert render_heading("Title", 1) == ["", "Title", "====="]
    assert render_heading("Sub", 2) == ["", "Sub", "---"]
    assert render_heading("Small", 3) == ["", "Small"]
    assert HeadingLevel.from_level(2) is HeadingLevel.TITLE2


def test_heading_with_color_keeps_text() -> None:
    lines = render_heading("Title", 1, color=True)
    assert "Title" in lines[1]
    assert lines[2] == "====="


@parametrize("level", [0, 4])
def test_heading_level_out_of_range(level: int) -> None:
    with pytest.raises(ValueError, match="Heading level"):
        render_heading("x", level)
