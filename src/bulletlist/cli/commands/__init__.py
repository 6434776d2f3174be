# topmark:header:start
#
#   project      : BulletList
#   file         : __init__.py
#   file_relpath : src/bulletlist/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the ``bulletlist`` group."""
