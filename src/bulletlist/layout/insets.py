# topmark:header:start
#
#   project      : BulletList
#   file         : insets.py
#   file_relpath : src/bulletlist/layout/insets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Edge insets used for padding (inside a border) and margin (outside it)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Insets:
    """Distances from each edge, in the renderer's unit.

    Attributes:
        top (int): Blank lines above.
        right (int): Blank columns to the right.
        bottom (int): Blank lines below.
        left (int): Blank columns to the left.
    """

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    def __post_init__(self) -> None:
        for name in ("top", "right", "bottom", "left"):
            if getattr(self, name) < 0:
                raise ValueError(f"Inset '{name}' must not be negative: {getattr(self, name)}")

    @classmethod
    def all(cls, value: int = 0) -> Insets:
        """Same inset on every edge."""
        return cls(top=value, right=value, bottom=value, left=value)

    @classmethod
    def symmetric(cls, *, top_bottom: int = 0, left_right: int = 0) -> Insets:
        """Vertical and/or horizontal insets."""
        return cls(top=top_bottom, right=left_right, bottom=top_bottom, left=left_right)

    @classmethod
    def from_value(cls, value: int | Mapping[str, Any] | None) -> Insets:
        """Build insets from a number (all edges) or a ``{top,right,bottom,left}`` table.

        Raises:
            ValueError: If a value is negative or the table has unknown keys.
            TypeError: If ``value`` is neither a number nor a mapping.
        """
        if value is None:
            return cls()
        if isinstance(value, bool):
            raise TypeError("Insets cannot be built from a boolean")
        if isinstance(value, (int, float)):
            return cls.all(int(value))
        if isinstance(value, Mapping):
            unknown = set(value) - {"top", "right", "bottom", "left"}
            if unknown:
                raise ValueError(f"Unknown inset keys: {', '.join(sorted(unknown))}")
            return cls(**{k: int(v) for k, v in value.items()})
        raise TypeError(f"Cannot build insets from {type(value).__name__}")

    @property
    def horizontal(self) -> int:
        """Sum of left and right insets."""
        return self.left + self.right

    @property
    def vertical(self) -> int:
        """Sum of top and bottom insets."""
        return self.top + self.bottom

    def __add__(self, other: Insets) -> Insets:
        return Insets(
            top=self.top + other.top,
            right=self.right + other.right,
            bottom=self.bottom + other.bottom,
            left=self.left + other.left,
        )

    def to_dict(self) -> dict[str, int]:
        """Return a TOML/JSON-friendly table."""
        return {"top": self.top, "right": self.right, "bottom": self.bottom, "left": self.left}
