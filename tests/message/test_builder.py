# topmark:header:start
#
#   project      : Tidings
#   file         : test_builder.py
#   file_relpath : tests/message/test_builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `TokenBuilder` and the shared token helpers."""

from __future__ import annotations

import pytest

from tidings.message.builder import TokenBuilder, lines, see_also
from tidings.message.tokens import AT_SAME_LINE, FLUSH, NEWLINE, RESET, Style, Text


def test_builder_appends_in_order() -> None:
    """Calls append tokens in call order."""
    tokens = TokenBuilder().text("a").nl().text("b {}", 1).flush().build()
    assert tokens == (Text("a"), NEWLINE, Text("b {}", (1,)), FLUSH)


def test_line_starts_new_line_only_when_needed() -> None:
    """`line()` inserts a break unless at the start of a line."""
    tokens = TokenBuilder().line("a").line("b").nl().line("c").build()
    assert tokens == (Text("a"), NEWLINE, Text("b"), NEWLINE, Text("c"))


def test_at_same_line_must_be_first() -> None:
    """`at_same_line()` is only valid on an empty builder."""
    assert TokenBuilder().at_same_line().text("x").build() == (AT_SAME_LINE, Text("x"))
    with pytest.raises(ValueError):
        TokenBuilder().text("x").at_same_line()


def test_styled_resets_after_text() -> None:
    """`styled()` wraps one fragment in a style and a reset."""
    tokens = TokenBuilder().styled("hi", bold=True).build()
    assert tokens == (Style.of(bold=True), Text("hi"), RESET)


def test_when_selects_branch() -> None:
    """Guards choose between branches; only the taken callable is evaluated."""
    calls: list[str] = []

    def then() -> tuple[Text, ...]:
        calls.append("then")
        return (Text("yes"),)

    def otherwise() -> tuple[Text, ...]:
        calls.append("otherwise")
        return (Text("no"),)

    assert TokenBuilder().when(True, then, otherwise).build() == (Text("yes"),)
    assert TokenBuilder().when(0, then, otherwise).build() == (Text("no"),)
    assert TokenBuilder().when(False, then).build() == ()
    assert calls == ["then", "otherwise"]


def test_when_accepts_literal_sequences() -> None:
    """Branches may be plain token sequences (strings become text)."""
    assert TokenBuilder().text("part").when(True, ("s",)).build() == (Text("part"), Text("s"))


def test_extend_splices_shared_tail() -> None:
    """A shared sub-sequence can be spliced into several messages."""
    tail = see_also("parts", "products")
    tokens = TokenBuilder().text("Part 1 is unknown").extend(tail).build()
    assert tokens == (
        Text("Part 1 is unknown"),
        NEWLINE,
        Text("See also: {}", ("parts, products",)),
    )
    assert len(TokenBuilder().extend(tail)) == 2


def test_see_also_without_topics_is_empty() -> None:
    """No topics means no tail at all."""
    assert see_also() == ()


def test_lines_helper() -> None:
    """`lines()` separates literal lines with line breaks."""
    assert lines("a", "b") == (Text("a"), NEWLINE, Text("b"))
    assert lines() == ()
