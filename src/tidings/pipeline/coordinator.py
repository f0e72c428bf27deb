# topmark:header:start
#
#   project      : Tidings
#   file         : coordinator.py
#   file_relpath : src/tidings/pipeline/coordinator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run one reported condition through the message pipeline.

`MessagePipeline.process(kind, message)`:
    1. resolves the message into tokens through the renderer registry;
    2. offers ``(message, kind, tokens)`` to the hook chain;
    3. if no hook handled it and the kind is enabled, writes the tokens with
       the line emitter, to the stream and prefix given by the kind's
       properties.

Every step except the final write degrades instead of failing: an unexpected
resolution error yields a fallback message naming the original one, and
failing hooks count as "not handled". Only `EmitError` reaches the caller.

Each invocation owns its token tuple; the shared state (registries, debug
topics) is read from snapshots, so concurrent invocations are independent.
"""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from threading import Lock
from typing import TYPE_CHECKING

import click

from tidings.config.color import resolve_color_mode
from tidings.config.kinds import Kind, Stream, kind_name, split_kind
from tidings.config.logging import get_logger
from tidings.config.model import QUIET_KINDS, PipelineConfig, Verbosity
from tidings.emit.destination import Destination
from tidings.emit.emitter import LineEmitter
from tidings.emit.text import tokens_to_string
from tidings.message.tokens import NEWLINE, Style, Text
from tidings.registry.hooks import HookChain
from tidings.registry.renderers import RendererRegistry

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import TextIO

    from tidings.config.kinds import KindProperties
    from tidings.config.logging import TidingsLogger
    from tidings.message.model import Message
    from tidings.message.tokens import TokenSeq

    KindLookup = Callable[[str], KindProperties]

logger: TidingsLogger = get_logger(__name__)


@dataclass(frozen=True)
class SourceLocation:
    """Source position a message refers to (shown as ``path:line``)."""

    path: str
    line: int

    def __str__(self) -> str:
        return f"{self.path}:{self.line}"


def degraded_tokens(message: Message, exc: BaseException) -> TokenSeq:
    """Return the tokens printed when resolving ``message`` failed unexpectedly."""
    return (
        Text("Unknown message: {}", (message.describe(),)),
        NEWLINE,
        Text("(rendering failed: {}: {})", (type(exc).__name__, exc)),
    )


class MessagePipeline:
    """Coordinator of renderer resolution, hook dispatch and line emission.

    Args:
        renderers (RendererRegistry | None): Renderer registry; a new empty one by default.
        hooks (HookChain | None): Hook chain; a new empty one by default.
        emitter (LineEmitter | None): Line emitter used for unhandled messages.
        config (PipelineConfig | None): Settings (verbosity, debug topics, kinds, ...).
        properties (KindLookup | None): Kind -> properties lookup. Defaults to
            ``config.kinds.lookup``.
        stdout (TextIO | None): Fixed stream for stdout kinds; defaults to the
            *current* ``sys.stdout`` at each call.
        stderr (TextIO | None): Fixed stream for stderr kinds; defaults to the
            *current* ``sys.stderr`` at each call.
        color (bool | None): Force color on/off; ``None`` applies the
            configured `ColorMode` to each destination stream.
    """

    def __init__(
        self,
        *,
        renderers: RendererRegistry | None = None,
        hooks: HookChain | None = None,
        emitter: LineEmitter | None = None,
        config: PipelineConfig | None = None,
        properties: KindLookup | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        color: bool | None = None,
    ) -> None:
        self.renderers = renderers if renderers is not None else RendererRegistry()
        self.hooks = hooks if hooks is not None else HookChain()
        self.emitter = emitter if emitter is not None else LineEmitter()
        self.config = config if config is not None else PipelineConfig()
        self.properties: KindLookup = (
            properties if properties is not None else self.config.kinds.lookup
        )
        self._stdout = stdout
        self._stderr = stderr
        self._color = color
        self._topics_lock = Lock()
        self._debug_topics: frozenset[str] = self.config.debug_topics

    # --- Debug topics ---

    def enable_debug(self, topic: str) -> None:
        """Enable printing of ``debug:<topic>`` messages."""
        with self._topics_lock:
            self._debug_topics = self._debug_topics | {topic}

    def disable_debug(self, topic: str) -> None:
        """Disable printing of ``debug:<topic>`` messages."""
        with self._topics_lock:
            self._debug_topics = self._debug_topics - {topic}

    def debugging(self, topic: str) -> bool:
        """Return True if ``debug:<topic>`` messages are printed."""
        return topic in self._debug_topics

    # --- Steps ---

    def tokens_for(self, message: Message) -> TokenSeq:
        """Resolve ``message`` into tokens; never raises."""
        try:
            return self.renderers.resolve(message)
        except Exception as exc:
            logger.error("Resolving %s failed: %s", message, exc)
            logger.debug("Resolution failure details", exc_info=True)
            return degraded_tokens(message, exc)

    def is_printed(self, kind: str, props: KindProperties) -> bool:
        """Return True if messages of ``kind`` reach the emitter."""
        if not props.enabled:
            return False
        base, topic = split_kind(kind)
        if topic is not None and base == Kind.DEBUG.value:
            return self.debugging(topic)
        if self.config.verbosity == Verbosity.SILENT and base in QUIET_KINDS:
            return False
        return True

    def destination_for(self, props: KindProperties) -> Destination:
        """Return the destination the kind's properties select."""
        if props.stream == Stream.STDOUT:
            stream = self._stdout if self._stdout is not None else sys.stdout
        else:
            stream = self._stderr if self._stderr is not None else sys.stderr
        dest = Destination(stream, name=props.stream.value)
        dest.color = (
            self._color
            if self._color is not None
            else resolve_color_mode(
                color_mode_override=self.config.color_mode,
                stream=dest.stream,
            )
        )
        return dest

    def prefix_for(self, props: KindProperties, location: SourceLocation | None = None) -> str:
        """Return the line prefix for a kind, with optional thread and location."""
        parts: list[str] = []
        if self.config.show_thread:
            parts.append(f"[{threading.current_thread().name}] ")
        parts.append(props.label)
        if location is not None and props.location:
            parts.append(f"{location}: ")
        return "".join(parts)

    # --- Entry point ---

    def process(
        self,
        kind: str | Kind,
        message: Message,
        *,
        location: SourceLocation | None = None,
    ) -> bool:
        """Report ``message`` with the given ``kind``.

        Args:
            kind (str | Kind): Message kind, e.g. ``"warning"`` or ``"debug:io"``.
            message (Message): The semantic message.
            location (SourceLocation | None): Optional source position for the prefix.

        Returns:
            bool: True if a hook handled the message, False otherwise
                (printed, or suppressed by kind/verbosity/topic).

        Raises:
            EmitError: If the destination stream cannot be written.
        """
        name = kind_name(kind)
        tokens: TokenSeq = self.tokens_for(message)

        if self.hooks.dispatch(message, name, tokens):
            return True

        props = self.properties(name)
        if not self.is_printed(name, props):
            logger.trace("Suppressed %s message %s", name, message)
            return False

        destination = self.destination_for(props)
        base_style = Style.of(fg=props.color) if props.color else None
        self.emitter.emit(
            destination,
            self.prefix_for(props, location),
            tokens,
            base_style=base_style,
        )
        if props.wait:
            click.pause()
        return False

    def message_to_string(self, message: Message) -> str:
        """Return the rendered text of ``message`` without printing it."""
        return tokens_to_string(self.tokens_for(message))
