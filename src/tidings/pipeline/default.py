# topmark:header:start
#
#   project      : Tidings
#   file         : default.py
#   file_relpath : src/tidings/pipeline/default.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process-wide default pipeline and convenience functions.

The default pipeline is created lazily with the built-in message catalog
registered. Applications may replace it (e.g. after loading a config file)
with `set_pipeline`.

Warning:
    The default pipeline is global state shared across the process. Tests
    should build a private `MessagePipeline`, or restore the previous default
    returned by `set_pipeline` in a ``finally`` block.
"""

from __future__ import annotations

from threading import Lock
from typing import TYPE_CHECKING

from tidings.catalog import register_builtin_messages
from tidings.config.logging import get_logger
from tidings.emit.destination import Destination
from tidings.emit.text import tokens_to_string
from tidings.pipeline.coordinator import MessagePipeline
from tidings.registry.renderers import RendererRegistry

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import TextIO

    from tidings.config.kinds import Kind
    from tidings.config.logging import TidingsLogger
    from tidings.config.model import PipelineConfig
    from tidings.message.model import Message
    from tidings.message.tokens import Token
    from tidings.pipeline.coordinator import SourceLocation

logger: TidingsLogger = get_logger(__name__)

_lock = Lock()
_default: MessagePipeline | None = None


def build_pipeline(config: PipelineConfig | None = None, **kwargs: object) -> MessagePipeline:
    """Return a new pipeline with the built-in catalog registered.

    Args:
        config (PipelineConfig | None): Optional settings.
        **kwargs (object): Extra keyword arguments for `MessagePipeline`.

    Returns:
        MessagePipeline: The new pipeline.
    """
    renderers = RendererRegistry()
    register_builtin_messages(renderers)
    return MessagePipeline(renderers=renderers, config=config, **kwargs)  # type: ignore[arg-type]


def get_pipeline() -> MessagePipeline:
    """Return the process-wide default pipeline, creating it on first use."""
    global _default
    with _lock:
        if _default is None:
            _default = build_pipeline()
            logger.debug("Created default message pipeline")
        return _default


def set_pipeline(pipeline: MessagePipeline | None) -> MessagePipeline | None:
    """Replace the default pipeline and return the previous one.

    Passing ``None`` resets it; the next `get_pipeline` call builds a fresh one.
    """
    global _default
    with _lock:
        previous, _default = _default, pipeline
    return previous


def print_message(
    kind: str | Kind,
    message: Message,
    *,
    location: SourceLocation | None = None,
) -> bool:
    """Report ``message`` through the default pipeline.

    Returns:
        bool: True if a hook handled the message.

    Raises:
        EmitError: If the destination stream cannot be written.
    """
    return get_pipeline().process(kind, message, location=location)


def print_message_lines(
    stream: TextIO,
    prefix: str,
    tokens: Iterable[Token],
    *,
    color: bool = False,
) -> None:
    """Print already-resolved tokens on ``stream``, bypassing renderers and hooks.

    Raises:
        EmitError: If the stream cannot be written.
    """
    get_pipeline().emitter.emit(Destination(stream, color=color), prefix, tokens)


def message_to_string(message: Message, registry: RendererRegistry | None = None) -> str:
    """Return the text of ``message`` without printing it.

    Args:
        message (Message): The message to render.
        registry (RendererRegistry | None): Registry to resolve with; defaults to
            the renderers of the default pipeline.

    Returns:
        str: The rendered lines joined by newlines.
    """
    if registry is not None:
        return tokens_to_string(registry.resolve(message))
    return tokens_to_string(get_pipeline().tokens_for(message))
