# topmark:header:start
#
#   project      : BulletList
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the BulletList test suite.

Sets TRACE logging for the whole run and keeps a developer's exported
``BULLETLIST_LOG_LEVEL`` from leaking into tests.

Notes:
    Build styles with `bulletlist.style.MutableListStyle` and `freeze()` them
    (or use `make_style`). Never mutate a frozen `ListStyle`; call
    `ListStyle.thaw()` and freeze again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from bulletlist.config import logging
from bulletlist.style import ListStyle, MutableListStyle

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    return as_typed_mark(pytest.mark.parametrize(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_bulletlist_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via the environment during tests."""
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Log at TRACE level for the whole test session."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty project directory (no config files to discover)."""
    cwd = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    return cwd


def make_style(**overrides: Any) -> ListStyle:
    """Return a frozen `ListStyle` built from defaults and ``overrides``."""
    return MutableListStyle(**overrides).freeze()
