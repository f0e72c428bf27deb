# topmark:header:start
#
#   project      : Tidings
#   file         : io.py
#   file_relpath : src/tidings/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML configuration sources for Tidings.

Configuration lives either in a ``tidings.toml`` file or in the
``[tool.tidings]`` table of a ``pyproject.toml``:

```toml
verbosity = "normal"          # or "silent"
debug_topics = ["io"]
show_thread = false
color = "auto"                # "always" | "never"

[kinds.warning]
label = "WARN: "
color = "magenta"

[kinds."debug:io"]
stream = "stdout"
```

Parsing is done with `tomlkit` and returned as plain `dict` structures before
validation, so the model classes never see TOML container types.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from tidings.config.color import ColorMode
from tidings.config.kinds import KindTable
from tidings.config.logging import get_logger
from tidings.config.model import PipelineConfig, Verbosity
from tidings.constants import (
    DEFAULT_TOML_CONFIG_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)
from tidings.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tidings.config.logging import TidingsLogger

logger: TidingsLogger = get_logger(__name__)

TomlTable = dict[str, Any]

_KNOWN_KEYS: frozenset[str] = frozenset(
    {"verbosity", "debug_topics", "show_thread", "color", "kinds"}
)


def load_toml_dict(path: Path) -> TomlTable:
    """Read and parse a TOML file into a plain dict.

    Args:
        path (Path): File to read.

    Returns:
        TomlTable: The parsed document.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        doc = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    logger.debug("Loaded TOML from %s", path)
    return cast("TomlTable", doc.unwrap())


def extract_tidings_table(path: Path, doc: TomlTable) -> TomlTable | None:
    """Return the Tidings table of a parsed document.

    For ``pyproject.toml`` this is ``[tool.tidings]`` (``None`` if absent);
    any other file is a Tidings config as a whole.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return doc
    node: Any = doc
    for key in PYPROJECT_TOOL_SECTION:
        if not isinstance(node, dict) or key not in node:
            return None
        node = node[key]
    if not isinstance(node, dict):
        raise ConfigError(f"[{'.'.join(PYPROJECT_TOOL_SECTION)}] in {path} must be a table")
    return cast("TomlTable", node)


def _enum_value(enum_cls: type[Any], key: str, value: Any) -> Any:
    try:
        return enum_cls(value)
    except ValueError as exc:
        choices = ", ".join(repr(m.value) for m in enum_cls)
        raise ConfigError(f"'{key}' must be one of {choices}, got {value!r}") from exc


def config_from_dict(table: Mapping[str, Any]) -> PipelineConfig:
    """Validate a Tidings table and build a `PipelineConfig`.

    Raises:
        ConfigError: On unknown keys or invalid values.
    """
    unknown = sorted(set(table) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")

    changes: dict[str, Any] = {}

    if "verbosity" in table:
        changes["verbosity"] = _enum_value(Verbosity, "verbosity", table["verbosity"])
    if "color" in table:
        changes["color_mode"] = _enum_value(ColorMode, "color", table["color"])
    if "show_thread" in table:
        if not isinstance(table["show_thread"], bool):
            raise ConfigError("'show_thread' must be a boolean")
        changes["show_thread"] = table["show_thread"]
    if "debug_topics" in table:
        topics = table["debug_topics"]
        if not isinstance(topics, list) or not all(isinstance(t, str) for t in topics):
            raise ConfigError("'debug_topics' must be a list of strings")
        changes["debug_topics"] = frozenset(topics)
    if "kinds" in table:
        kinds = table["kinds"]
        if not isinstance(kinds, dict):
            raise ConfigError("'kinds' must be a table")
        changes["kinds"] = KindTable.from_toml_table(kinds)

    return replace(PipelineConfig(), **changes)


def load_config(path: Path) -> PipelineConfig:
    """Load a `PipelineConfig` from a TOML file.

    A ``pyproject.toml`` without ``[tool.tidings]`` yields the defaults.

    Raises:
        ConfigError: If the file is unreadable, not TOML, or invalid.
    """
    table = extract_tidings_table(path, load_toml_dict(path))
    if table is None:
        logger.debug("No [tool.tidings] table in %s; using defaults", path)
        return PipelineConfig()
    return config_from_dict(table)


def discover_config(start: Path | None = None) -> Path | None:
    """Find the nearest config file from ``start`` (default: CWD) upward.

    In each directory, ``tidings.toml`` wins over a ``pyproject.toml`` that has
    a ``[tool.tidings]`` table.

    Returns:
        Path | None: The config file, or None if none is found.
    """
    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / DEFAULT_TOML_CONFIG_NAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_TOML_NAME
        if pyproject.is_file():
            try:
                if extract_tidings_table(pyproject, load_toml_dict(pyproject)) is not None:
                    return pyproject
            except ConfigError as exc:
                logger.warning("Ignoring unreadable %s: %s", pyproject, exc)
    return None
