# topmark:header:start
#
#   project      : Tidings
#   file         : builder.py
#   file_relpath : src/tidings/message/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Declarative construction of token sequences.

Renderers are ordinary functions. `TokenBuilder` lets them append literal
tokens, branch on guard conditions, and splice in shared sub-sequences
(such as the `see_also` tail) without managing lists by hand.

Example:
    ```python
    def render(message: Message) -> TokenSeq:
        (part,) = message.args
        return (
            TokenBuilder()
            .text("Part {} is not defined", part)
            .when(part == 0, lines("Part 0 is reserved"))
            .extend(see_also("parts"))
            .build()
        )
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from tidings.message.tokens import (
    AT_SAME_LINE,
    FLUSH,
    NEWLINE,
    RESET,
    NewLine,
    Style,
    Text,
    as_tokens,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from tidings.message.tokens import Token, TokenSeq

Branch = Union["Iterable[Token]", "Callable[[], Iterable[Token]]"]


def _expand(branch: Branch) -> TokenSeq:
    if callable(branch):
        return as_tokens(branch())
    return as_tokens(branch)


class TokenBuilder:
    """Fluent builder for token tuples.

    Every method returns the builder so calls chain; `build()` returns the
    immutable result. A builder is a local value and is not shared between
    threads.
    """

    def __init__(self) -> None:
        self._tokens: list[Token] = []

    def __len__(self) -> int:
        return len(self._tokens)

    def text(self, template: str, *args: object) -> TokenBuilder:
        """Append a text fragment to the current line."""
        self._tokens.append(Text(template, tuple(args)))
        return self

    def line(self, template: str, *args: object) -> TokenBuilder:
        """Start a new line (unless at the start of one) and append text."""
        if self._tokens and not isinstance(self._tokens[-1], NewLine):
            self._tokens.append(NEWLINE)
        return self.text(template, *args)

    def nl(self) -> TokenBuilder:
        """Append a line break."""
        self._tokens.append(NEWLINE)
        return self

    def flush(self) -> TokenBuilder:
        """Append a flush directive."""
        self._tokens.append(FLUSH)
        return self

    def at_same_line(self) -> TokenBuilder:
        """Mark the message as continuing the current output line.

        Raises:
            ValueError: If tokens were already appended.
        """
        if self._tokens:
            raise ValueError("at_same_line() must be the first token")
        self._tokens.append(AT_SAME_LINE)
        return self

    def style(self, **attributes: object) -> TokenBuilder:
        """Apply ``click.style`` attributes to the following text on this line."""
        self._tokens.append(Style.of(**attributes))
        return self

    def reset(self) -> TokenBuilder:
        """Drop any active style."""
        self._tokens.append(RESET)
        return self

    def styled(self, template: str, *args: object, **attributes: object) -> TokenBuilder:
        """Append a styled text fragment, then reset the style."""
        return self.style(**attributes).text(template, *args).reset()

    def extend(self, tokens: Iterable[Token]) -> TokenBuilder:
        """Splice in a (shared) token sub-sequence."""
        self._tokens.extend(as_tokens(tokens))
        return self

    def when(
        self,
        condition: object,
        then: Branch,
        otherwise: Branch | None = None,
    ) -> TokenBuilder:
        """Append ``then`` if ``condition`` is truthy, else ``otherwise``.

        Branches may be token iterables or zero-argument callables returning
        one; callables are only evaluated for the branch that is taken.
        """
        if condition:
            self._tokens.extend(_expand(then))
        elif otherwise is not None:
            self._tokens.extend(_expand(otherwise))
        return self

    def build(self) -> TokenSeq:
        """Return the accumulated tokens as an immutable tuple."""
        return tuple(self._tokens)


def lines(*texts: str) -> TokenSeq:
    """Return literal text lines separated by line breaks."""
    builder = TokenBuilder()
    for i, t in enumerate(texts):
        if i:
            builder.nl()
        builder.text(t)
    return builder.build()


def see_also(*topics: str) -> TokenSeq:
    """Return the shared "see also" tail naming related topics.

    Returns an empty tuple when no topics are given.
    """
    if not topics:
        return ()
    return (NEWLINE, Text("See also: {}", (", ".join(topics),)))
