# topmark:header:start
#
#   project      : BulletList
#   file         : getters.py
#   file_relpath : src/bulletlist/config/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for TOML config tables.

Each getter validates the expected shape and, on a mismatch, logs a warning
and records it in a `DiagnosticLog`, then returns None so the key is treated
as unset. User mistakes are surfaced without aborting the run.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final, TypeVar

from bulletlist.core.enum_mixins import KeyedStrEnum
from bulletlist.layout.insets import Insets

if TYPE_CHECKING:
    from bulletlist.config.logging import BulletListLogger
    from bulletlist.config.types import TomlTable
    from bulletlist.core.diagnostics import DiagnosticLog

KS = TypeVar("KS", bound=KeyedStrEnum)


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: BulletListLogger,
) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected string in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected string in {loc}, got {type(value).__name__}: {value}")
    return None


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: BulletListLogger,
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected bool in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected bool in {loc}, got {type(value).__name__}: {value}")
    return None


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: BulletListLogger,
    minimum: int | None = 0,
) -> int | None:
    """Return an optional int value, warning when present but not a valid `int`.

    Notes:
        - Missing key / None -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
        - Values below ``minimum`` are rejected.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Expected int in %s, got %s: %r", loc, type(value).__name__, value)
        diagnostics.add_warning(f"Expected int in {loc}, got {type(value).__name__}: {value!r}")
        return None

    if minimum is not None and value < minimum:
        logger.warning("Value in %s must be >= %d, got %d", loc, minimum, value)
        diagnostics.add_warning(f"Value in {loc} must be >= {minimum}, got {value}")
        return None
    return int(value)


def get_enum_value_checked(
    table: TomlTable,
    key: str,
    enum_cls: type[KS],
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: BulletListLogger,
) -> KS | None:
    """Parse a `KeyedStrEnum` value (key, name or alias) from TOML.

    - Missing key -> None
    - Wrong type -> warning + None
    - Unknown value -> warning + None
    """
    raw: Any | None = table.get(key)
    if raw is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(raw, str):
        logger.warning(
            "Expected string enum value in %s, got %s: %r", loc, type(raw).__name__, raw
        )
        diagnostics.add_warning(
            f"Expected string enum value in {loc}, got {type(raw).__name__}: {raw!r}"
        )
        return None

    member = enum_cls.parse(raw)
    if member is None:
        allowed = ", ".join(enum_cls.keys())
        logger.warning("Invalid value for %s: %r (allowed: %s)", loc, raw, allowed)
        diagnostics.add_warning(f"Invalid value for {loc}: {raw!r} (allowed: {allowed})")
    return member


def get_insets_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: BulletListLogger,
) -> Insets | None:
    """Parse an inset from a number or a ``{top, right, bottom, left}`` table."""
    raw: Any | None = table.get(key)
    if raw is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(raw, (int, float, Mapping)) or isinstance(raw, bool):
        logger.warning("Expected number or table in %s, got %s: %r", loc, type(raw).__name__, raw)
        diagnostics.add_warning(
            f"Expected number or table in {loc}, got {type(raw).__name__}: {raw!r}"
        )
        return None
    try:
        return Insets.from_value(raw)
    except (TypeError, ValueError) as exc:
        logger.warning("Invalid insets in %s: %s", loc, exc)
        diagnostics.add_warning(f"Invalid insets in {loc}: {exc}")
        return None
