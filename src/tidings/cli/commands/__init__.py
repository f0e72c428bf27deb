# topmark:header:start
#
#   project      : Tidings
#   file         : __init__.py
#   file_relpath : src/tidings/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the Tidings CLI (`version`, `kinds`, `render`)."""
