# topmark:header:start
#
#   project      : BulletList
#   file         : colored_enum.py
#   file_relpath : src/bulletlist/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String enum whose members carry a text styler.

`StyledStrEnum` stores a plain string value plus a callable that decorates
text for display (typically a ``yachalk`` builder such as ``chalk.bold``).
Enum semantics (hashing, equality, ``repr``) are untouched because the styler
lives outside ``_value_``.

Example:
    ```python
    from yachalk import chalk

    class Emphasis(StyledStrEnum):
        STRONG = ("strong", chalk.bold)
        SOFT = ("soft", chalk.dim)

    print(Emphasis.STRONG.style("hello"))  # bold "hello"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable compatible with `yachalk.ChalkBuilder.__call__`."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Decorate and join ``args`` for display."""
        ...


class StyledStrEnum(str, Enum):
    """Enum whose value is a string and that carries an associated styler."""

    _value_: str
    _style: Colorizer

    def __new__(cls, text: str, style: Colorizer) -> StyledStrEnum:
        """Construct a member from its text value and styler.

        Args:
            text (str): Value stored in ``_value_``.
            style (Colorizer): Callable used to decorate text.

        Returns:
            StyledStrEnum: The new member.
        """
        obj: StyledStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._style = style
        return obj

    @property
    def value(self) -> str:
        """The member's text value."""
        return self._value_

    @property
    def style(self) -> Colorizer:
        """The member's styler."""
        return self._style
