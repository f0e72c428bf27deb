# topmark:header:start
#
#   project      : Tidings
#   file         : __init__.py
#   file_relpath : src/tidings/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registries for message renderers and hooks.

These are the only mutation surface of the pipeline. Registration is expected
to be rare (module import, plugin init, tests); dispatch reads snapshots.

Warning:
    The default pipeline's registries are shared across the process. In tests,
    wrap temporary registrations in try/finally, or build a private
    `tidings.pipeline.MessagePipeline`.
"""

from __future__ import annotations

from tidings.registry.hooks import HookChain, HookEntry
from tidings.registry.renderers import RendererEntry, RendererRegistry, unknown_message_tokens

__all__ = [
    "HookChain",
    "HookEntry",
    "RendererEntry",
    "RendererRegistry",
    "unknown_message_tokens",
]
