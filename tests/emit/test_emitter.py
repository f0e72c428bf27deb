# topmark:header:start
#
#   project      : Tidings
#   file         : test_emitter.py
#   file_relpath : tests/emit/test_emitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the line emitter: line rules, flush, styling and atomicity."""

from __future__ import annotations

import gc
import io
import threading
from typing import TYPE_CHECKING

import click
import pytest

from tests.conftest import parametrize
from tidings.core.errors import EmitError
from tidings.emit import destination as destination_mod
from tidings.emit.destination import Destination, lock_for
from tidings.emit.emitter import LineEmitter, render_block
from tidings.message.tokens import AT_SAME_LINE, FLUSH, NEWLINE, RESET, Style, Text

if TYPE_CHECKING:
    from tidings.message.tokens import Token


def _emit(tokens: list[Token], prefix: str = "") -> str:
    out = io.StringIO()
    LineEmitter().emit(Destination(out), prefix, tokens)
    return out.getvalue()


@parametrize(
    "tokens,expected",
    [
        ([Text("a")], "a\n"),
        ([Text("a"), NEWLINE], "a\n"),
        ([Text("a"), NEWLINE, Text("b")], "a\nb\n"),
        ([Text("a"), NEWLINE, NEWLINE], "a\n\n"),
        ([NEWLINE], "\n"),
        ([Text("a"), Text("b")], "ab\n"),
    ],
)
def test_newline_rules(tokens: list[Token], expected: str) -> None:
    """A trailing newline is added once; explicit breaks are kept."""
    assert _emit(tokens) == expected


def test_prefix_on_every_line() -> None:
    """Each line, including blank ones, starts with the prefix."""
    tokens = [Text("one"), NEWLINE, NEWLINE, Text("three")]
    assert _emit(tokens, "% ") == "% one\n% \n% three\n"


def test_final_flush_suppresses_trailing_newline() -> None:
    """A final Flush leaves the cursor at the end of the last line."""
    assert _emit([Text("Continue? "), FLUSH], "") == "Continue? "
    # A Flush that is not last does not change line breaks
    assert _emit([FLUSH, Text("x")], "") == "x\n"


@parametrize(
    "tokens,expected",
    [
        ([Text("line"), NEWLINE, FLUSH], "line\n"),
        ([Text("a"), NEWLINE, Text("b"), NEWLINE, FLUSH], "a\nb\n"),
        ([NEWLINE, FLUSH], "\n"),
        ([Text("a"), NEWLINE, Style.of(bold=True), FLUSH], "a\n"),
    ],
)
def test_final_flush_keeps_closed_line_break(tokens: list[Token], expected: str) -> None:
    """A final Flush after a NewLine does not remove that line break."""
    assert _emit(tokens, "") == expected


def test_flush_calls_stream_flush() -> None:
    """The stream is flushed when the sequence contains Flush."""

    class Tracking(io.StringIO):
        flushed = 0

        def flush(self) -> None:
            self.flushed += 1
            super().flush()

    out = Tracking()
    LineEmitter().emit(Destination(out), "", [Text("x"), FLUSH])
    assert out.flushed >= 1


def test_at_same_line_omits_first_prefix() -> None:
    """AtSameLine as first token continues the current output line."""
    tokens = [AT_SAME_LINE, Text(" done"), NEWLINE, Text("next")]
    assert _emit(tokens, "% ") == " done\n% next\n"


def test_at_same_line_ignored_when_not_first() -> None:
    """AtSameLine later in the sequence has no effect."""
    assert _emit([Text("a"), AT_SAME_LINE], "% ") == "% a\n"


def test_empty_sequence_emits_nothing() -> None:
    """An empty token sequence writes nothing at all."""
    assert _emit([], "% ") == ""


def test_style_is_dropped_without_color() -> None:
    """Styles do not leak ANSI codes on a colorless destination."""
    tokens = [Style.of(fg="red"), Text("red"), RESET, Text(" plain")]
    assert _emit(tokens) == "red plain\n"


def test_style_applied_with_color() -> None:
    """With color, styled fragments use click.style."""
    out = io.StringIO()
    tokens = [Style.of(fg="red"), Text("red"), RESET, Text(" plain")]
    LineEmitter().emit(Destination(out, color=True), "", tokens)
    assert out.getvalue() == click.style("red", fg="red") + " plain\n"


def test_style_resets_at_line_break() -> None:
    """A style lasts until the end of its line."""
    rendered = LineEmitter().render(
        [Style.of(bold=True), Text("a"), NEWLINE, Text("b")],
        color=True,
    )
    assert rendered == click.style("a", bold=True) + "\n" + "b\n"


def test_base_style_colors_prefix_and_text() -> None:
    """The base style applies to the prefix and to every line."""
    base = Style.of(fg="yellow")
    rendered = LineEmitter().render(
        [Text("a"), NEWLINE, Text("b")], prefix="W: ", color=True, base_style=base
    )
    prefix = click.style("W: ", fg="yellow")
    a = click.style("a", fg="yellow")
    b = click.style("b", fg="yellow")
    assert rendered == f"{prefix}{a}\n{prefix}{b}\n"


def test_render_matches_emit() -> None:
    """`render()` returns exactly what `emit()` writes."""
    tokens = [Text("a {}", (1,)), NEWLINE, Text("b"), FLUSH]
    assert LineEmitter().render(tokens, prefix="> ") == _emit(tokens, "> ")


def test_render_block_flags() -> None:
    """The interpreted block reports same-line, flush and newline flags."""
    block = render_block([AT_SAME_LINE, Text("x"), FLUSH])
    assert block.lines == ("x",)
    assert block.same_line is True
    assert block.flush is True
    assert block.trailing_newline is False


def test_closed_stream_raises_emit_error() -> None:
    """Write failures surface as EmitError naming the destination."""
    out = io.StringIO()
    out.close()
    with pytest.raises(EmitError) as exc_info:
        LineEmitter().emit(Destination(out, name="closed"), "", [Text("x")])
    assert exc_info.value.destination == "closed"


def test_destinations_share_stream_lock() -> None:
    """All destinations wrapping one stream use the same lock."""
    out = io.StringIO()
    assert Destination(out).lock is Destination(out).lock
    assert lock_for(out) is Destination(out).lock


def test_concurrent_blocks_do_not_interleave() -> None:
    """Multi-line messages from many threads stay contiguous."""
    out = io.StringIO()
    emitter = LineEmitter()
    n_threads, n_lines = 8, 20

    def worker(idx: int) -> None:
        tokens: list[Token] = []
        for j in range(n_lines):
            if j:
                tokens.append(NEWLINE)
            tokens.append(Text("{}:{}", (idx, j)))
        for _ in range(5):
            emitter.emit(Destination(out), f"[{idx}] ", tokens)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(n_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    lines = out.getvalue().splitlines()
    assert len(lines) == n_threads * n_lines * 5
    for start in range(0, len(lines), n_lines):
        block = lines[start : start + n_lines]
        idx = block[0].split("]")[0].lstrip("[")
        assert block == [f"[{idx}] {idx}:{j}" for j in range(n_lines)]


def test_stream_lock_released_with_stream() -> None:
    """A collected stream does not leave its lock behind."""
    gc.collect()
    before = len(destination_mod._stream_locks)
    out = io.StringIO()
    lock_for(out)
    assert len(destination_mod._stream_locks) == before + 1
    del out
    gc.collect()
    assert len(destination_mod._stream_locks) == before


def test_unreferenceable_stream_gets_stable_lock() -> None:
    """Streams without weak reference support still get one lock each."""

    class SlottedStream:
        __slots__ = ("data",)

        def __init__(self) -> None:
            self.data: list[str] = []

        def write(self, text: str) -> int:
            self.data.append(text)
            return len(text)

        def flush(self) -> None:
            pass

    stream = SlottedStream()
    first = lock_for(stream)  # type: ignore[arg-type]
    assert lock_for(stream) is first  # type: ignore[arg-type]
    assert lock_for(SlottedStream()) is not first  # type: ignore[arg-type]
