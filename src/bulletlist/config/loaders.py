# topmark:header:start
#
#   project      : BulletList
#   file         : loaders.py
#   file_relpath : src/bulletlist/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load list style configuration from TOML sources.

Sources are merged last-wins on top of the built-in defaults:

1. ``[tool.bulletlist.style]`` in ``pyproject.toml`` (in the working directory),
2. ``[style]`` in ``bulletlist.toml`` (in the working directory),
3. each explicitly passed config file, in order.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from bulletlist.config.keys import (
    BULLETLIST_TOML_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_PATH,
    Toml,
)
from bulletlist.config.logging import get_logger
from bulletlist.core.diagnostics import DiagnosticLog
from bulletlist.style import MutableListStyle

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bulletlist.config.logging import BulletListLogger
    from bulletlist.config.types import TomlTable

logger: BulletListLogger = get_logger(__name__)


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load config from {path}: {reason}")
        self.path = path
        self.reason = reason


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(path, str(e)) from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(path, str(e)) from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def _dig(data: TomlTable, keys: Iterable[str]) -> Any:
    node: Any = data
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def style_table_from_document(data: TomlTable, *, is_pyproject: bool) -> Any:
    """Return the raw style table of a parsed document (None when absent)."""
    if is_pyproject:
        return _dig(data, (*PYPROJECT_TOOL_PATH, Toml.SECTION_STYLE))
    return data.get(Toml.SECTION_STYLE)


def load_style_file(path: Path, diagnostics: DiagnosticLog) -> MutableListStyle:
    """Parse the style section of one TOML file.

    ``pyproject.toml`` files are read from ``[tool.bulletlist.style]``, any other
    file from ``[style]``.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    data = load_toml_dict(path)
    is_pyproject = path.name == PYPROJECT_TOML_NAME
    raw = style_table_from_document(data, is_pyproject=is_pyproject)
    where = (
        f"[{'.'.join((*PYPROJECT_TOOL_PATH, Toml.SECTION_STYLE))}]"
        if is_pyproject
        else f"[{Toml.SECTION_STYLE}]"
    )
    if raw is None:
        logger.debug("No %s section in %s", where, path)
        return MutableListStyle()
    if not isinstance(raw, dict):
        logger.warning("Expected a table for %s in %s", where, path)
        diagnostics.add_warning(f"Expected a table for {where} in {path}")
        return MutableListStyle()
    logger.debug("Loaded %s from %s", where, path)
    return MutableListStyle.from_toml_table(
        cast("TomlTable", raw), where=f"{path.name}:{where}", diagnostics=diagnostics
    )


def discover_config_files(root: Path) -> list[Path]:
    """Return the project config files present in ``root``, lowest precedence first."""
    found: list[Path] = []
    for name in (PYPROJECT_TOML_NAME, BULLETLIST_TOML_NAME):
        candidate = root / name
        if candidate.is_file():
            found.append(candidate)
    return found


def load_style(
    config_paths: Iterable[Path | str] = (),
    *,
    root: Path | None = None,
    no_config: bool = False,
) -> tuple[MutableListStyle, DiagnosticLog]:
    """Merge all configured style sources.

    Args:
        config_paths (Iterable[Path | str]): Explicit config files, highest precedence last.
        root (Path | None): Directory searched for project config files
            (defaults to the current working directory).
        no_config (bool): Skip discovery of project config files.

    Returns:
        tuple[MutableListStyle, DiagnosticLog]: The merged (still mutable) style
        and the diagnostics collected along the way.

    Raises:
        ConfigError: If any source cannot be read or parsed.
    """
    diagnostics = DiagnosticLog()
    merged = MutableListStyle()

    sources: list[Path] = []
    if not no_config:
        sources.extend(discover_config_files(root or Path.cwd()))
    sources.extend(Path(p) for p in config_paths)

    for path in sources:
        merged = merged.merge_with(load_style_file(path, diagnostics))
    return merged, diagnostics
