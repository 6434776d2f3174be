# topmark:header:start
#
#   project      : BulletList
#   file         : __init__.py
#   file_relpath : src/bulletlist/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core helpers shared across BulletList (no UI or CLI dependencies)."""
