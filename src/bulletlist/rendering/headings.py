# topmark:header:start
#
#   project      : BulletList
#   file         : headings.py
#   file_relpath : src/bulletlist/rendering/headings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Section headings for gallery pages.

Three levels, each preceded by a blank line:

- level 1: bold, underlined with ``=``
- level 2: underlined, with a ``-`` rule below
- level 3: italic

ANSI styling is applied through ``yachalk`` only when ``color`` is True; the
rules under levels 1 and 2 keep headings distinguishable without color.
"""

from __future__ import annotations

from yachalk import chalk

from bulletlist.rendering.colored_enum import StyledStrEnum
from bulletlist.rendering.width import display_width


class HeadingLevel(StyledStrEnum):
    """Heading levels and their text style."""

    TITLE = ("title", chalk.bold)
    TITLE2 = ("title2", chalk.underline)
    TITLE3 = ("title3", chalk.italic)

    @classmethod
    def from_level(cls, level: int) -> HeadingLevel:
        """Map ``1..3`` to a member.

        Raises:
            ValueError: If ``level`` is not 1, 2 or 3.
        """
        members = list(cls)
        if not 1 <= level <= len(members):
            raise ValueError(f"Heading level must be between 1 and {len(members)}, got {level}")
        return members[level - 1]


_RULES: dict[HeadingLevel, str] = {
    HeadingLevel.TITLE: "=",
    HeadingLevel.TITLE2: "-",
}


def render_heading(text: str, level: int = 1, *, color: bool = False) -> list[str]:
    """Render a heading as lines.

    Args:
        text (str): Heading text.
        level (int): Heading level, 1 (largest) to 3.
        color (bool): Apply ANSI styling.

    Returns:
        list[str]: A blank separator line, the heading and an optional rule.
    """
    heading = HeadingLevel.from_level(level)
    lines = ["", heading.style(text) if color else text]
    rule = _RULES.get(heading)
    if rule:
        lines.append(rule * display_width(text))
    return lines
