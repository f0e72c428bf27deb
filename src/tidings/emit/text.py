# topmark:header:start
#
#   project      : Tidings
#   file         : text.py
#   file_relpath : src/tidings/emit/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Side-effect-free string conversion of token sequences.

Used by callers that need a message as data (tests, GUIs, exception text)
rather than printed output. Styling and flush directives are ignored; line
breaks follow the same rules as the line emitter, so
``tokens_to_string(tokens)`` equals the emitter's unprefixed output minus its
trailing newline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tidings.emit.emitter import render_block

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tidings.message.tokens import Token


def tokens_to_lines(tokens: Iterable[Token]) -> list[str]:
    """Return the logical lines of a token sequence."""
    return list(render_block(tokens).lines)


def tokens_to_string(tokens: Iterable[Token]) -> str:
    """Return a token sequence as a single newline-joined string."""
    return "\n".join(render_block(tokens).lines)
