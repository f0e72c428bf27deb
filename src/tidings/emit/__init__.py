# topmark:header:start
#
#   project      : Tidings
#   file         : __init__.py
#   file_relpath : src/tidings/emit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output side of the pipeline: destinations, the line emitter, string conversion."""

from __future__ import annotations

from tidings.emit.destination import Destination, lock_for
from tidings.emit.emitter import LineEmitter, RenderedBlock, apply_style, render_block
from tidings.emit.text import tokens_to_lines, tokens_to_string

__all__ = [
    "Destination",
    "LineEmitter",
    "RenderedBlock",
    "apply_style",
    "lock_for",
    "render_block",
    "tokens_to_lines",
    "tokens_to_string",
]
