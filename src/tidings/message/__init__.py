# topmark:header:start
#
#   project      : Tidings
#   file         : __init__.py
#   file_relpath : src/tidings/message/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Semantic messages, output tokens and the token builder.

Design:
    - Messages are immutable `Message` instances keyed by shape ``(tag, arity)``.
    - Renderers expand messages into immutable token tuples.
    - `TokenBuilder` is the declarative way to assemble those tuples.
"""

from __future__ import annotations

from tidings.message.builder import TokenBuilder, lines, see_also
from tidings.message.model import Message, Shape, make_shape
from tidings.message.tokens import (
    AtSameLine,
    Flush,
    NewLine,
    Style,
    Text,
    Token,
    TokenSeq,
    as_tokens,
    text,
)

__all__ = [
    "AtSameLine",
    "Flush",
    "Message",
    "NewLine",
    "Shape",
    "Style",
    "Text",
    "Token",
    "TokenBuilder",
    "TokenSeq",
    "as_tokens",
    "lines",
    "make_shape",
    "see_also",
    "text",
]
