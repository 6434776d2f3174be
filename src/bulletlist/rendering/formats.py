# topmark:header:start
#
#   project      : BulletList
#   file         : formats.py
#   file_relpath : src/bulletlist/rendering/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats for CLI commands."""

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
        TEXT: Human-friendly text; may include ANSI color if enabled.
        JSON: A single JSON document (machine-readable, never colored).
    """

    TEXT = "text"
    JSON = "json"
