# topmark:header:start
#
#   project      : Tidings
#   file         : builtin.py
#   file_relpath : src/tidings/catalog/builtin.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in message catalog.

Generic messages every application can report without registering its own
renderers:

| Shape                  | Meaning                                         |
|------------------------|-------------------------------------------------|
| ``format/2``           | ad-hoc message: template and argument list      |
| ``goal_failed/1``      | an operation failed without further detail      |
| ``exception/1``        | a Python exception (non-exceptions fall back)   |
| ``deprecated/2``       | a name and its replacement, with a see-also tail|
| ``welcome/2``          | banner: application name and version            |
| ``halt/0``             | the application is shutting down                |
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tidings.core.errors import NotApplicable
from tidings.message.builder import TokenBuilder, see_also

if TYPE_CHECKING:
    from tidings.message.model import Message
    from tidings.message.tokens import TokenSeq
    from tidings.registry.renderers import RendererRegistry


def render_format(message: Message) -> TokenSeq:
    """``format(template, args)``: template with a list/tuple of arguments."""
    template, args = message.args
    if not isinstance(template, str):
        raise NotApplicable
    if not isinstance(args, (list, tuple)):
        args = (args,)
    return TokenBuilder().text(template, *args).build()


def render_goal_failed(message: Message) -> TokenSeq:
    (goal,) = message.args
    return TokenBuilder().text("Goal failed: {}", goal).build()


def render_exception(message: Message) -> TokenSeq:
    """``exception(exc)`` for real exceptions; includes the cause when chained."""
    (exc,) = message.args
    if not isinstance(exc, BaseException):
        raise NotApplicable
    cause = exc.__cause__
    return (
        TokenBuilder()
        .text("{}: {}", type(exc).__name__, exc)
        .when(
            cause is not None,
            lambda: (
                TokenBuilder().nl().text("Caused by {}: {}", type(cause).__name__, cause).build()
            ),
        )
        .build()
    )


def render_unknown_exception(message: Message) -> TokenSeq:
    (term,) = message.args
    return TokenBuilder().text("Unknown exception: {!r}", term).build()


def render_deprecated(message: Message) -> TokenSeq:
    name, replacement = message.args
    return (
        TokenBuilder()
        .text("{} is deprecated", name)
        .when(replacement, lambda: TokenBuilder().text("; use {} instead", replacement).build())
        .extend(see_also(str(replacement)) if replacement else ())
        .build()
    )


def render_welcome(message: Message) -> TokenSeq:
    name, version = message.args
    return (
        TokenBuilder()
        .styled("Welcome to {}", name, bold=True)
        .nl()
        .text("Version {}", version)
        .build()
    )


def render_halt(message: Message) -> TokenSeq:
    return TokenBuilder().text("Halting").build()


def register_builtin_messages(registry: RendererRegistry) -> None:
    """Register the built-in catalog on ``registry``."""
    registry.register(("format", 2), render_format)
    registry.register(("goal_failed", 1), render_goal_failed)
    registry.register(("exception", 1), render_exception)
    registry.register(("exception", 1), render_unknown_exception)
    registry.register(("deprecated", 2), render_deprecated)
    registry.register(("welcome", 2), render_welcome)
    registry.register(("halt", 0), render_halt)
