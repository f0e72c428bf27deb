# topmark:header:start
#
#   project      : Tidings
#   file         : __init__.py
#   file_relpath : src/tidings/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tidings package.

Tidings turns structured *messages* (a tag plus ordered arguments describing a
condition) into sequences of renderable *tokens*, lets pluggable *hooks*
intercept them, and falls back to printing prefixed lines on a stream chosen
by the message *kind*.

Typical usage:
    ```python
    from tidings import Message, TokenBuilder, get_pipeline, print_message

    registry = get_pipeline().renderers

    @registry.renderer("no_such_part", 1)
    def _no_such_part(message: Message):
        return TokenBuilder().text("Part {} is not defined or used", *message.args).build()

    print_message("warning", Message("no_such_part", 42))
    ```
"""

from __future__ import annotations

from tidings.config.kinds import Kind, KindProperties, KindTable
from tidings.core.errors import (
    ConfigError,
    EmitError,
    NotApplicable,
    RegistrationError,
    TidingsError,
)
from tidings.emit.destination import Destination
from tidings.emit.emitter import LineEmitter
from tidings.emit.text import tokens_to_lines, tokens_to_string
from tidings.message.builder import TokenBuilder, lines, see_also
from tidings.message.model import Message
from tidings.message.tokens import AtSameLine, Flush, NewLine, Style, Text, Token
from tidings.pipeline.coordinator import MessagePipeline, SourceLocation
from tidings.pipeline.default import (
    get_pipeline,
    message_to_string,
    print_message,
    print_message_lines,
    set_pipeline,
)
from tidings.registry.hooks import HookChain
from tidings.registry.renderers import RendererRegistry

__all__ = [
    "AtSameLine",
    "ConfigError",
    "Destination",
    "EmitError",
    "Flush",
    "HookChain",
    "Kind",
    "KindProperties",
    "KindTable",
    "LineEmitter",
    "Message",
    "MessagePipeline",
    "NewLine",
    "NotApplicable",
    "RegistrationError",
    "RendererRegistry",
    "SourceLocation",
    "Style",
    "Text",
    "TidingsError",
    "Token",
    "TokenBuilder",
    "get_pipeline",
    "lines",
    "message_to_string",
    "print_message",
    "print_message_lines",
    "see_also",
    "set_pipeline",
    "tokens_to_lines",
    "tokens_to_string",
]
