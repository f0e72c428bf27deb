# topmark:header:start
#
#   project      : Tidings
#   file         : tokens.py
#   file_relpath : src/tidings/message/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output tokens produced by renderers.

A renderer expands a message into a finite, ordered tuple of tokens. Tokens
are primitive output instructions; they carry no prefix and no destination.

Key types:
    - `Text`: a ``str.format`` template with ordered arguments.
    - `NewLine`: ends the current logical line.
    - `Flush`: flush the destination; as last token it suppresses the
      trailing newline.
    - `Style`: ``click.style`` attributes for the following text on the
      current line. An empty `Style` resets.
    - `AtSameLine`: as first token, continue the current output line
      without a prefix.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from tidings.config.logging import get_logger
from tidings.message.model import safe_repr

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tidings.config.logging import TidingsLogger

logger: TidingsLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Text:
    """Text fragment: a format template plus its ordered arguments.

    Without arguments the template is used literally, so braces need no escaping.
    """

    template: str
    args: tuple[object, ...] = ()

    def render(self) -> str:
        """Return the formatted text.

        A template that does not accept its arguments, or an argument that
        fails to format, renders as the raw template followed by the argument
        list, so a broken renderer still produces readable output.
        """
        if not self.args:
            return self.template
        try:
            return self.template.format(*self.args)
        except Exception as exc:
            logger.debug("Cannot format %r: %s", self.template, type(exc).__name__)
            return f"{self.template} [{', '.join(safe_repr(a) for a in self.args)}]"


@dataclass(frozen=True, slots=True)
class NewLine:
    """Line break."""


@dataclass(frozen=True, slots=True)
class Flush:
    """Flush directive."""


@dataclass(frozen=True, slots=True)
class AtSameLine:
    """Continue the current output line (first token only)."""


@dataclass(frozen=True, slots=True)
class Style:
    """Styling for subsequent text on the current line.

    Attributes are ``click.style`` keyword arguments stored as sorted pairs so
    that the token stays hashable and comparable.
    """

    attributes: tuple[tuple[str, object], ...] = ()

    @classmethod
    def of(cls, **attributes: object) -> Style:
        """Build a style from ``click.style`` keyword arguments."""
        return cls(tuple(sorted(attributes.items())))

    @property
    def is_reset(self) -> bool:
        """Return True if this style carries no attributes."""
        return not self.attributes

    def as_kwargs(self) -> dict[str, object]:
        """Return the attributes as a keyword dict for ``click.style``."""
        return dict(self.attributes)


Token = Union[Text, NewLine, Flush, Style, AtSameLine]
TokenSeq = tuple[Token, ...]

TOKEN_TYPES: tuple[type, ...] = (Text, NewLine, Flush, Style, AtSameLine)

NEWLINE: NewLine = NewLine()
FLUSH: Flush = Flush()
AT_SAME_LINE: AtSameLine = AtSameLine()
RESET: Style = Style()


def text(template: str, *args: object) -> Text:
    """Shorthand for `Text` with positional arguments."""
    return Text(template, tuple(args))


def as_tokens(items: Iterable[object]) -> TokenSeq:
    """Materialize an iterable into a token tuple.

    Args:
        items (Iterable[object]): Tokens produced by a renderer. Plain strings
            are accepted as literal `Text` tokens.

    Returns:
        TokenSeq: The fully materialized token tuple.

    Raises:
        TypeError: If an item is not a token.
    """
    out: list[Token] = []
    for item in items:
        if isinstance(item, str):
            out.append(Text(item))
        elif isinstance(item, TOKEN_TYPES):
            out.append(item)  # type: ignore[arg-type]
        else:
            raise TypeError(f"Not an output token: {item!r}")
    return tuple(out)
