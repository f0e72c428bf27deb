# topmark:header:start
#
#   project      : Tidings
#   file         : inventory.py
#   file_relpath : src/tidings/catalog/inventory.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Inventory messages enriched from a parts table.

Demonstrates renderers that look up domain state at render time. The parts
table maps part numbers to the product they belong to; it is only read, and
changes to it are visible to the next rendering.

Shapes:
    * ``no_such_part/1``: enriched with the owning product when known,
      otherwise the generic "not defined or used" line.
    * ``part_count/2``: product name and number of parts.

Parts tables can be loaded from TOML:

```toml
[parts]
42 = "SKT-9"
7 = "BRK-2"
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tidings.config.io import load_toml_dict
from tidings.core.errors import ConfigError, NotApplicable
from tidings.message.builder import TokenBuilder

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from tidings.message.model import Message
    from tidings.message.tokens import TokenSeq
    from tidings.registry.renderers import RendererRegistry


def _part_key(part: object) -> object:
    """Normalize numeric strings so ``"42"`` and ``42`` find the same part."""
    if isinstance(part, str) and part.isdigit():
        return int(part)
    return part


def register_inventory_messages(
    registry: RendererRegistry,
    parts: Mapping[Any, str],
) -> None:
    """Register the inventory renderers, reading product names from ``parts``.

    Args:
        registry (RendererRegistry): Registry to register on.
        parts (Mapping[Any, str]): Part number -> product name. Read at render time.
    """

    def no_such_part_in_product(message: Message) -> TokenSeq:
        (part,) = message.args
        product = parts.get(_part_key(part))
        if product is None:
            raise NotApplicable
        return (
            TokenBuilder()
            .text("Part {} is not defined or used in product {}", part, product)
            .build()
        )

    def no_such_part(message: Message) -> TokenSeq:
        (part,) = message.args
        return TokenBuilder().text("Part {} is not defined or used", part).build()

    def part_count(message: Message) -> TokenSeq:
        product, count = message.args
        return (
            TokenBuilder()
            .text("Product {} has {:d} part", product, count)
            .when(count != 1, ("s",))
            .build()
        )

    registry.register(("no_such_part", 1), no_such_part_in_product, name="no_such_part/enriched")
    registry.register(("no_such_part", 1), no_such_part, name="no_such_part/generic")
    registry.register(("part_count", 2), part_count, name="part_count")


def load_parts_table(path: Path) -> dict[Any, str]:
    """Load a ``[parts]`` table from a TOML file.

    Raises:
        ConfigError: If the file is invalid or the table is malformed.
    """
    doc = load_toml_dict(path)
    table = doc.get("parts", {})
    if not isinstance(table, dict):
        raise ConfigError(f"[parts] in {path} must be a table")
    parts: dict[Any, str] = {}
    for key, product in table.items():
        if not isinstance(product, str):
            raise ConfigError(f"Product for part {key!r} in {path} must be a string")
        parts[_part_key(key)] = product
    return parts
