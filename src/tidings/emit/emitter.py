# topmark:header:start
#
#   project      : Tidings
#   file         : emitter.py
#   file_relpath : src/tidings/emit/emitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Default consumer of token sequences: prefixed lines on a stream.

The emitter turns a complete token tuple into one text block and writes the
block under the destination's lock, so one message is always printed as a
unit.

Line rules:
    * `Text` appends to the current line; the prefix starts every line.
    * `NewLine` ends the current line. The automatic newline at the end of
      the block never adds a second line break after a final `NewLine`.
    * `Flush` flushes the stream after writing; as the final token it also
      suppresses the automatic trailing newline of an open line. A line
      already ended by `NewLine` keeps its line break.
    * `Style` styles the following text of the current line via
      ``click.style`` (no-op without color); styling resets at line breaks.
    * `AtSameLine` as first token omits the prefix on the first line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import click

from tidings.config.logging import get_logger
from tidings.core.errors import EmitError
from tidings.message.tokens import AtSameLine, Flush, NewLine, Style, Text

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from tidings.config.logging import TidingsLogger
    from tidings.emit.destination import Destination
    from tidings.message.tokens import Token

    Styler = Callable[[str, "Style | None"], str]

logger: TidingsLogger = get_logger(__name__)


@dataclass(frozen=True)
class RenderedBlock:
    """Lines produced from a token tuple, before prefixing.

    Attributes:
        lines (tuple[str, ...]): Logical lines, without line terminators.
        same_line (bool): True if the first line continues the current output line.
        trailing_newline (bool): False if a final `Flush` leaves the last line open.
        flush (bool): True if the sequence requested a flush.
    """

    lines: tuple[str, ...]
    same_line: bool = False
    trailing_newline: bool = True
    flush: bool = False

    def to_text(
        self,
        prefix: str = "",
        prefix_style: Style | None = None,
        *,
        color: bool = False,
    ) -> str:
        """Join the lines into one block, prefixing every line.

        Args:
            prefix (str): Text written at the start of each line.
            prefix_style (Style | None): Optional style for the prefix.
            color (bool): Whether to apply ``prefix_style``.

        Returns:
            str: The text block, including the trailing newline unless suppressed.
        """
        styled_prefix = apply_style(prefix, prefix_style) if color and prefix else prefix
        out: list[str] = []
        for i, line in enumerate(self.lines):
            if i == 0 and self.same_line:
                out.append(line)
            else:
                out.append(f"{styled_prefix}{line}")
        text = "\n".join(out)
        if self.trailing_newline:
            text += "\n"
        return text


def apply_style(text: str, style: Style | None) -> str:
    """Return ``text`` styled with ``click.style``; unknown attributes are ignored."""
    if style is None or style.is_reset or not text:
        return text
    try:
        return click.style(text, **style.as_kwargs())  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        logger.debug("Ignoring invalid style %r: %s", style, exc)
        return text


def _plain(text: str, style: Style | None) -> str:
    return text


def render_block(
    tokens: Iterable[Token],
    *,
    styler: Styler = _plain,
    base_style: Style | None = None,
) -> RenderedBlock:
    """Interpret a token sequence into logical lines.

    Args:
        tokens (Iterable[Token]): The token sequence.
        styler (Styler): Function applying a style to a text fragment.
        base_style (Style | None): Style active at the start of every line
            (e.g. the kind color); `Style` tokens replace it until the line ends.

    Returns:
        RenderedBlock: The interpreted lines and flags.
    """
    seq = tuple(tokens)
    lines: list[str] = []
    current: list[str] = []
    style: Style | None = base_style
    open_line = False
    line_closed = False
    same_line = False
    flush = False

    for i, tok in enumerate(seq):
        if isinstance(tok, Text):
            current.append(styler(tok.render(), style))
            open_line = True
            line_closed = False
        elif isinstance(tok, NewLine):
            lines.append("".join(current))
            current = []
            style = base_style
            open_line = False
            line_closed = True
        elif isinstance(tok, Flush):
            flush = True
        elif isinstance(tok, Style):
            style = base_style if tok.is_reset else tok
        elif isinstance(tok, AtSameLine):
            if i == 0:
                same_line = True
        else:
            logger.debug("Skipping unknown token %r", tok)

    if open_line or not lines:
        lines.append("".join(current))

    # A final Flush only keeps an open line open; a closed line keeps its break.
    trailing_newline = line_closed or not (seq and isinstance(seq[-1], Flush))
    return RenderedBlock(
        lines=tuple(lines),
        same_line=same_line,
        trailing_newline=trailing_newline,
        flush=flush,
    )


class LineEmitter:
    """Write token sequences as prefixed lines to a destination."""

    def render(
        self,
        tokens: Iterable[Token],
        *,
        prefix: str = "",
        color: bool = False,
        base_style: Style | None = None,
    ) -> str:
        """Return the exact text `emit` would write, without writing it."""
        block = render_block(
            tokens,
            styler=apply_style if color else _plain,
            base_style=base_style,
        )
        return block.to_text(prefix, base_style, color=color)

    def emit(
        self,
        destination: Destination,
        prefix: str,
        tokens: Iterable[Token],
        *,
        base_style: Style | None = None,
    ) -> None:
        """Write ``tokens`` to ``destination`` as one atomic block.

        Args:
            destination (Destination): Target stream wrapper.
            prefix (str): Text written at the start of every line.
            tokens (Iterable[Token]): Complete token sequence of one message.
            base_style (Style | None): Style applied to every line (kind color).

        Raises:
            EmitError: If the destination cannot be written or flushed.
        """
        seq = tuple(tokens)
        if not seq:
            return
        block = render_block(
            seq,
            styler=apply_style if destination.color else _plain,
            base_style=base_style,
        )
        text = block.to_text(prefix, base_style, color=destination.color)
        with destination.lock:
            try:
                destination.write(text)
                if block.flush:
                    destination.flush()
            except (OSError, ValueError) as exc:
                raise EmitError(
                    f"Cannot write message to {destination.name}: {exc}",
                    destination=destination.name,
                ) from exc
        logger.trace("Emitted %d line(s) to %s", len(block.lines), destination.name)
