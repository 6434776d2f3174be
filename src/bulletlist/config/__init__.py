# topmark:header:start
#
#   project      : BulletList
#   file         : __init__.py
#   file_relpath : src/bulletlist/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration: logging setup, TOML keys, checked getters and loaders."""
