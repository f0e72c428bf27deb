# topmark:header:start
#
#   project      : Tidings
#   file         : __init__.py
#   file_relpath : src/tidings/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for Tidings: logging, color policy, kind properties, TOML sources.

Design:
    - Kind display properties (`KindProperties`) are looked up per kind via
      `KindTable`; nothing in the pipeline branches on a kind name.
    - `PipelineConfig` is an immutable snapshot built from code defaults and,
      optionally, a ``tidings.toml`` / ``[tool.tidings]`` source.
"""

from __future__ import annotations

from tidings.config.color import ColorMode, resolve_color_mode
from tidings.config.io import config_from_dict, discover_config, load_config
from tidings.config.kinds import (
    DEFAULT_KIND_PROPERTIES,
    Kind,
    KindProperties,
    KindTable,
    Stream,
    kind_name,
    split_kind,
)
from tidings.config.model import PipelineConfig, Verbosity

__all__ = [
    "DEFAULT_KIND_PROPERTIES",
    "ColorMode",
    "Kind",
    "KindProperties",
    "KindTable",
    "PipelineConfig",
    "Stream",
    "Verbosity",
    "config_from_dict",
    "discover_config",
    "kind_name",
    "load_config",
    "resolve_color_mode",
    "split_kind",
]
