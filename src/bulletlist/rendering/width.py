# topmark:header:start
#
#   project      : BulletList
#   file         : width.py
#   file_relpath : src/bulletlist/rendering/width.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Display width of text in a monospaced terminal.

Wide and full-width East Asian characters and emoji presentation sequences
take two columns; combining marks, zero-width joiners and variation
selectors take none. This is an approximation of what terminals do, which is
all the text renderer needs to keep columns aligned.
"""

from __future__ import annotations

import textwrap
import unicodedata
from functools import lru_cache
from typing import Final

_ZERO_WIDTH: Final[frozenset[str]] = frozenset(
    {
        "\u200b",  # zero width space
        "\u200c",  # zero width non-joiner
        "\u200d",  # zero width joiner
        "\u2060",  # word joiner
        "\ufeff",  # zero width no-break space
    }
)


@lru_cache(maxsize=4096)
def char_width(ch: str) -> int:
    """Columns occupied by a single code point."""
    if ch in _ZERO_WIDTH:
        return 0
    code = ord(ch)
    # Variation selectors (text/emoji presentation)
    if 0xFE00 <= code <= 0xFE0F:
        return 0
    if unicodedata.combining(ch):
        return 0
    category = unicodedata.category(ch)
    if category in ("Mn", "Me", "Cf"):
        return 0
    if category == "Cc":
        return 0
    if unicodedata.east_asian_width(ch) in ("W", "F"):
        return 2
    return 1


def display_width(text: str) -> int:
    """Columns occupied by ``text`` (no tabs or newlines expected)."""
    return sum(char_width(ch) for ch in text)


def pad_right(text: str, width: int) -> str:
    """Pad ``text`` with spaces to ``width`` display columns."""
    return text + " " * max(0, width - display_width(text))


def pad_left(text: str, width: int) -> str:
    """Right-align ``text`` within ``width`` display columns."""
    return " " * max(0, width - display_width(text)) + text


def center(text: str, width: int) -> str:
    """Center ``text`` within ``width`` display columns (extra space goes right)."""
    gap = max(0, width - display_width(text))
    left = gap // 2
    return " " * left + text + " " * (gap - left)


def _take_columns(text: str, columns: int) -> int:
    """Number of leading code points of ``text`` that fit in ``columns``."""
    used = 0
    for count, ch in enumerate(text):
        used += char_width(ch)
        if used > columns:
            return count
    return len(text)


class DisplayWidthWrapper(textwrap.TextWrapper):
    """`textwrap.TextWrapper` measuring chunks in display columns.

    The stock wrapper counts code points, so a line of wide characters can
    take up to twice the requested width. Long words are broken between
    characters, never inside a wide character.
    """

    def _handle_long_word(
        self,
        reversed_chunks: list[str],
        cur_line: list[str],
        cur_len: int,
        width: int,
    ) -> None:
        chunk = reversed_chunks[-1]
        if not self.break_long_words:
            if not cur_line:
                cur_line.append(reversed_chunks.pop())
            return
        end = _take_columns(chunk, max(1, width - cur_len))
        if end == 0 and not cur_line:
            # A wide character in a one-column line still has to go somewhere.
            end = 1
        if end:
            cur_line.append(chunk[:end])
            reversed_chunks[-1] = chunk[end:]

    def _wrap_chunks(self, chunks: list[str]) -> list[str]:
        lines: list[str] = []
        chunks.reverse()
        while chunks:
            indent = self.subsequent_indent if lines else self.initial_indent
            width = max(1, self.width - display_width(indent))
            if self.drop_whitespace and lines and chunks[-1].strip() == "":
                del chunks[-1]

            cur_line: list[str] = []
            cur_len = 0
            while chunks:
                chunk_width = display_width(chunks[-1])
                if cur_len + chunk_width > width:
                    break
                cur_line.append(chunks.pop())
                cur_len += chunk_width

            if chunks and display_width(chunks[-1]) > width:
                self._handle_long_word(chunks, cur_line, cur_len, width)
                if chunks and not chunks[-1]:
                    chunks.pop()

            if self.drop_whitespace and cur_line and cur_line[-1].strip() == "":
                del cur_line[-1]
            if cur_line:
                lines.append(indent + "".join(cur_line))
        return lines
