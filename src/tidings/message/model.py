# topmark:header:start
#
#   project      : Tidings
#   file         : model.py
#   file_relpath : src/tidings/message/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Semantic messages.

A `Message` describes *what* happened (``no_such_part(42)``), never *how* it
should read. The same message can be rendered by different renderers,
intercepted by hooks, or printed with a kind-specific prefix.

Sections:
    * Shape: the ``(tag, arity)`` key renderers are registered under.
    * Message: immutable tag + ordered arguments.
    * make_shape: validated shape construction for registration APIs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tidings.core.errors import RegistrationError

if TYPE_CHECKING:
    from collections.abc import Iterable

Shape = tuple[str, int]

UNREPRESENTABLE = "<unrepresentable>"


def safe_repr(value: object) -> str:
    """Return ``repr(value)``, or a placeholder if its ``__repr__`` raises."""
    try:
        return repr(value)
    except Exception:
        return UNREPRESENTABLE


def make_shape(tag: str, arity: int) -> Shape:
    """Return a validated ``(tag, arity)`` shape.

    Args:
        tag (str): Message tag; must be a non-empty string.
        arity (int): Number of message arguments; must be a non-negative integer.

    Returns:
        Shape: The shape tuple.

    Raises:
        RegistrationError: If the tag or arity is invalid.
    """
    if not isinstance(tag, str) or not tag:
        raise RegistrationError(f"Message tag must be a non-empty string, got {tag!r}")
    # bool is an int subclass; reject it explicitly
    if isinstance(arity, bool) or not isinstance(arity, int) or arity < 0:
        raise RegistrationError(f"Message arity must be a non-negative integer, got {arity!r}")
    return (tag, arity)


@dataclass(frozen=True, slots=True, init=False)
class Message:
    """Immutable semantic message: a tag and ordered arguments.

    Example:
        ```python
        m = Message("no_such_part", 42)
        assert m.shape == ("no_such_part", 1)
        assert str(m) == "no_such_part(42)"
        ```
    """

    tag: str
    args: tuple[object, ...]

    def __init__(self, tag: str, *args: object) -> None:
        if not isinstance(tag, str) or not tag:
            raise ValueError(f"Message tag must be a non-empty string, got {tag!r}")
        object.__setattr__(self, "tag", tag)
        object.__setattr__(self, "args", tuple(args))

    @classmethod
    def of(cls, tag: str, args: Iterable[object] = ()) -> Message:
        """Build a message from a tag and an iterable of arguments."""
        return cls(tag, *args)

    @property
    def arity(self) -> int:
        """Return the number of arguments."""
        return len(self.args)

    @property
    def shape(self) -> Shape:
        """Return the ``(tag, arity)`` key used for renderer lookup."""
        return (self.tag, len(self.args))

    def describe(self) -> str:
        """Return a compact term-like description, e.g. ``no_such_part(42)``.

        Arguments whose ``repr`` fails are shown as ``<unrepresentable>``.
        """
        if not self.args:
            return self.tag
        return f"{self.tag}({', '.join(safe_repr(a) for a in self.args)})"

    def __str__(self) -> str:
        return self.describe()
