# topmark:header:start
#
#   project      : Tidings
#   file         : __init__.py
#   file_relpath : src/tidings/catalog/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Message catalogs: ready-made renderers for common message shapes."""

from __future__ import annotations

from tidings.catalog.builtin import register_builtin_messages
from tidings.catalog.inventory import load_parts_table, register_inventory_messages

__all__ = [
    "load_parts_table",
    "register_builtin_messages",
    "register_inventory_messages",
]
