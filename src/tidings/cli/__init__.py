# topmark:header:start
#
#   project      : Tidings
#   file         : __init__.py
#   file_relpath : src/tidings/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tidings CLI package.

This package groups all Click command definitions and supporting utilities
for the Tidings command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        tidings = "tidings.cli.main:cli"

All subcommands live in `tidings.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
