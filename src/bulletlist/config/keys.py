# topmark:header:start
#
#   project      : BulletList
#   file         : keys.py
#   file_relpath : src/bulletlist/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for BulletList configuration.

Keys defined here are the external configuration API (``bulletlist.toml`` and
``[tool.bulletlist]`` in ``pyproject.toml``); renaming one is a breaking change.
"""

from __future__ import annotations

from typing import Final

PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
BULLETLIST_TOML_NAME: Final[str] = "bulletlist.toml"

# `[tool.bulletlist]` in pyproject.toml
PYPROJECT_TOOL_PATH: Final[tuple[str, ...]] = ("tool", "bulletlist")


class Toml:
    """TOML section names and keys used by BulletList configuration."""

    # [style]
    SECTION_STYLE: Final[str] = "style"

    KEY_ITEM_SPACING: Final[str] = "item_spacing"
    KEY_MARKER: Final[str] = "marker"
    KEY_BULLET: Final[str] = "bullet"
    KEY_MARKER_PREFIX: Final[str] = "prefix"
    KEY_MARKER_START: Final[str] = "start"
    KEY_MARKER_SUFFIX: Final[str] = "suffix"
    KEY_BULLET_WIDTH: Final[str] = "bullet_width"
    KEY_BULLET_ALIGNMENT: Final[str] = "bullet_alignment"
    KEY_SHOW_BORDER: Final[str] = "show_border"
    KEY_FILL_WIDTH: Final[str] = "fill_width"
    KEY_CONTENT_ALIGNMENT: Final[str] = "content_alignment"
    KEY_PADDING: Final[str] = "padding"
    KEY_MARGIN: Final[str] = "margin"
    KEY_WIDTH: Final[str] = "width"
