# topmark:header:start
#
#   project      : BulletList
#   file         : test_insets.py
#   file_relpath : tests/unit/test_insets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for `bulletlist.layout.insets`."""

from __future__ import annotations

import pytest

from bulletlist.layout import Insets


def test_defaults_and_factories() -> None:
    assert Insets() == Insets(0, 0, 0, 0)
    assert Insets.all(2) == Insets(2, 2, 2, 2)
    assert Insets.symmetric(top_bottom=1, left_right=3) == Insets(top=1, right=3, bottom=1, left=3)


def test_sums_and_addition() -> None:
    insets = Insets(top=1, right=2, bottom=3, left=4)
    assert insets.horizontal == 6
    assert insets.vertical == 4
    assert insets + Insets.all(1) == Insets(2, 3, 4, 5)


def test_negative_is_rejected() -> None:
    with pytest.raises(ValueError, match="left"):
        Insets(left=-1)


def test_from_value() -> None:
    assert Insets.from_value(None) == Insets()
    assert Insets.from_value(2) == Insets.all(2)
    assert Insets.from_value({"left": 2, "right": 1}) == Insets(right=1, left=2)


def test_from_value_errors() -> None:
    with pytest.raises(ValueError, match="Unknown inset keys"):
        Insets.from_value({"middle": 1})
    with pytest.raises(TypeError):
        Insets.from_value(True)
    with pytest.raises(TypeError):
        Insets.from_value("2")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        Insets.from_value(-1)


def test_to_dict() -> None:
    assert Insets(1, 2, 3, 4).to_dict() == {"top": 1, "right": 2, "bottom": 3, "left": 4}
