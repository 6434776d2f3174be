# topmark:header:start
#
#   project      : BulletList
#   file         : diagnostics.py
#   file_relpath : src/bulletlist/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics collected while loading configuration."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """A severity level and a message."""

    level: DiagnosticLevel
    message: str

    def __str__(self) -> str:
        return f"{self.level.value}: {self.message}"


@dataclass
class DiagnosticLog:
    """Append-only collection of diagnostics."""

    items: list[Diagnostic] = field(default_factory=list)

    def add(self, level: DiagnosticLevel, message: str) -> None:
        self.items.append(Diagnostic(level, message))

    def add_warning(self, message: str) -> None:
        self.add(DiagnosticLevel.WARNING, message)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
