# topmark:header:start
#
#   project      : BulletList
#   file         : samples.py
#   file_relpath : src/bulletlist/samples.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sample item lists used by the gallery."""

from __future__ import annotations

from typing import Final

from bulletlist.core.enum_mixins import KeyedStrEnum

_LOREM: Final[str] = "Lorem ipsum dolor sit amet, consectetur adipiscing elit."


class DataSet(KeyedStrEnum):
    """Built-in sample data sets."""

    DATA1 = ("data1", "Mixed lengths", ("mixed", "1"))
    DATA2 = ("data2", "Short items", ("short", "2"))
    DATA3 = ("data3", "Five paragraphs", ("long", "3"))

    @property
    def items(self) -> tuple[str, ...]:
        """The item texts of this data set."""
        return _ITEMS[self]


_ITEMS: Final[dict[DataSet, tuple[str, ...]]] = {
    DataSet.DATA1: (
        "Short item",
        "Long item. With a few more words",
        f"Very long item. {_LOREM} Aenean varius.",
    ),
    DataSet.DATA2: (
        "Item 1",
        "Item #2",
        "The third item",
    ),
    DataSet.DATA3: tuple(
        f"This is list item {idx}. {_LOREM} Donec vitae." for idx in range(1, 6)
    ),
}

DEFAULT_DATASET: Final[DataSet] = DataSet.DATA1
