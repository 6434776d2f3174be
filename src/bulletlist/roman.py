# topmark:header:start
#
#   project      : BulletList
#   file         : roman.py
#   file_relpath : src/bulletlist/roman.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Roman numeral conversion.

The encoder uses greedy subtraction over the canonical 13-entry table of
subtractive notation. Two flavours are provided:

- `to_roman`: strict, raises `RomanRangeError` outside ``1..3999``.
- `roman_numeral_for`: total, returns `OUT_OF_RANGE_TEXT` instead of raising.
  Use this one where a list prefix must always be displayable.

`from_roman` is the strict inverse for canonical numerals.

Example:
    ```python
    from bulletlist.roman import from_roman, to_roman

    assert to_roman(1994) == "MCMXCIV"
    assert from_roman("mcmxciv") == 1994
    ```
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Final

from bulletlist.config.logging import get_logger

logger = get_logger(__name__)

MIN_ROMAN: Final[int] = 1
MAX_ROMAN: Final[int] = 3999

ROMAN_NUMERALS: Final[tuple[tuple[int, str], ...]] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

OUT_OF_RANGE_TEXT: Final[str] = f"Number must be between {MIN_ROMAN} and {MAX_ROMAN}"

# Canonical numerals only: no "IIII", "VX", "IM", ...
_CANONICAL_RE: Final[re.Pattern[str]] = re.compile(
    r"^M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})$"
)

_SYMBOL_VALUES: Final[dict[str, int]] = {
    "M": 1000,
    "D": 500,
    "C": 100,
    "L": 50,
    "X": 10,
    "V": 5,
    "I": 1,
}


class RomanRangeError(ValueError):
    """Raised when a number cannot be written as a standard Roman numeral."""

    def __init__(self, value: int) -> None:
        super().__init__(f"{OUT_OF_RANGE_TEXT} (got {value})")
        self.value = value


class RomanParseError(ValueError):
    """Raised when a string is not a canonical Roman numeral."""


def _check_int(n: object) -> int:
    # bool is an int subclass; True -> "I" would be surprising.
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Expected an int, got {type(n).__name__}")
    return n


@lru_cache(maxsize=512)
def _encode(n: int) -> str:
    parts: list[str] = []
    remainder = n
    for value, symbol in ROMAN_NUMERALS:
        repeats, remainder = divmod(remainder, value)
        parts.append(symbol * repeats)
    return "".join(parts)


def to_roman(n: int, *, lower: bool = False) -> str:
    """Convert an integer to a Roman numeral.

    Args:
        n (int): The number to convert, ``1 <= n <= 3999``.
        lower (bool): Return lowercase symbols (``"xiv"``) if True.

    Returns:
        str: The Roman numeral in standard subtractive notation.

    Raises:
        TypeError: If ``n`` is not an ``int``.
        RomanRangeError: If ``n`` is outside ``[1, 3999]``.
    """
    n = _check_int(n)
    if not MIN_ROMAN <= n <= MAX_ROMAN:
        raise RomanRangeError(n)
    numeral = _encode(n)
    return numeral.lower() if lower else numeral


def roman_numeral_for(n: int, *, lower: bool = False) -> str:
    """Convert an integer to a Roman numeral, never raising for range errors.

    Out-of-range input yields `OUT_OF_RANGE_TEXT`, which callers can show
    verbatim. Use `to_roman` when a silent placeholder is not acceptable.

    Args:
        n (int): The number to convert.
        lower (bool): Return lowercase symbols if True.

    Returns:
        str: The Roman numeral, or `OUT_OF_RANGE_TEXT`.
    """
    try:
        return to_roman(n, lower=lower)
    except RomanRangeError:
        logger.debug("Number %r out of Roman numeral range", n)
        return OUT_OF_RANGE_TEXT


def is_roman(text: str) -> bool:
    """Return True if ``text`` is a canonical Roman numeral (case-insensitive)."""
    token = text.strip().upper()
    return bool(token) and _CANONICAL_RE.match(token) is not None


def from_roman(text: str) -> int:
    """Convert a canonical Roman numeral back to an integer.

    Args:
        text (str): Numeral such as ``"MCMXCIV"``; case and surrounding
            whitespace are ignored.

    Returns:
        int: The decoded value.

    Raises:
        RomanParseError: If ``text`` is empty or not canonical.
    """
    if not is_roman(text):
        raise RomanParseError(f"Not a valid Roman numeral: {text!r}")
    token = text.strip().upper()

    total = 0
    prev = 0
    # Right to left: a smaller symbol before a larger one is subtracted.
    for ch in reversed(token):
        value = _SYMBOL_VALUES[ch]
        if value < prev:
            total -= value
        else:
            total += value
            prev = value
    return total
