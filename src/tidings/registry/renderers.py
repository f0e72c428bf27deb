# topmark:header:start
#
#   project      : Tidings
#   file         : renderers.py
#   file_relpath : src/tidings/registry/renderers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Renderer registry: message shape -> ordered renderer alternatives.

Each shape ``(tag, arity)`` maps to an ordered tuple of alternatives. Resolving
a message tries them in registration order and returns the tokens of the
first one that completes with a non-empty result.

A renderer declines a message by:
    * raising `NotApplicable`,
    * returning ``None`` or an empty sequence, or
    * raising any other exception (logged at DEBUG).

When no alternative applies, the registry returns a fallback sequence
describing the raw message, so resolution never fails.

Notes:
    * Renderers may perform read-only lookups against application state
      (e.g. a parts table) to enrich a message.
    * Registration is serialized by an ``RLock``. Each shape's alternatives
      are stored as a tuple that is replaced on mutation, so resolution reads
      a consistent snapshot without holding the lock while renderers run.
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from typing import TYPE_CHECKING

from tidings.config.logging import get_logger
from tidings.constants import UNKNOWN_MESSAGE_TEMPLATE
from tidings.core.errors import NotApplicable, RegistrationError
from tidings.message.model import make_shape
from tidings.message.tokens import Text, as_tokens

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from tidings.config.logging import TidingsLogger
    from tidings.message.model import Message, Shape
    from tidings.message.tokens import Token, TokenSeq

    RendererProc = Callable[[Message], "Iterable[Token] | None"]

logger: TidingsLogger = get_logger(__name__)


@dataclass(frozen=True)
class RendererEntry:
    """One registered alternative for a message shape."""

    shape: Shape
    procedure: RendererProc
    name: str


def unknown_message_tokens(message: Message) -> TokenSeq:
    """Return the fallback tokens for a message no renderer handles."""
    return (Text(UNKNOWN_MESSAGE_TEMPLATE, (message.describe(),)),)


def _procedure_name(procedure: object) -> str:
    return getattr(procedure, "__qualname__", None) or repr(procedure)


class RendererRegistry:
    """Ordered, first-success dispatch table for message renderers."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._table: dict[Shape, tuple[RendererEntry, ...]] = {}

    # --- Registration ---

    def register(
        self,
        shape: Shape,
        procedure: RendererProc,
        *,
        name: str | None = None,
    ) -> RendererEntry:
        """Append an alternative renderer for ``shape``.

        Args:
            shape (Shape): ``(tag, arity)`` of the messages this renderer expands.
            procedure (RendererProc): Callable taking the message and returning tokens.
            name (str | None): Optional name used for unregistration and logging.
                Defaults to the procedure's qualified name.

        Returns:
            RendererEntry: The registered entry.

        Raises:
            RegistrationError: If the shape is invalid or the procedure is not callable.
        """
        key: Shape = make_shape(*shape)
        if not callable(procedure):
            raise RegistrationError(f"Renderer for {key} is not callable: {procedure!r}")
        entry = RendererEntry(
            shape=key, procedure=procedure, name=name or _procedure_name(procedure)
        )
        with self._lock:
            self._table[key] = (*self._table.get(key, ()), entry)
        logger.debug("Registered renderer %s for %s/%d", entry.name, key[0], key[1])
        return entry

    def renderer(
        self,
        tag: str,
        arity: int,
        *,
        name: str | None = None,
    ) -> Callable[[RendererProc], RendererProc]:
        """Decorator form of `register`.

        Example:
            ```python
            @registry.renderer("no_such_part", 1)
            def _render(message: Message) -> TokenSeq:
                ...
            ```
        """

        def _decorator(procedure: RendererProc) -> RendererProc:
            self.register((tag, arity), procedure, name=name)
            return procedure

        return _decorator

    def unregister(self, shape: Shape, which: str | RendererProc) -> bool:
        """Remove alternatives for ``shape`` matching a name or procedure.

        Args:
            shape (Shape): The shape the renderer was registered under.
            which (str | RendererProc): Entry name, or the registered procedure itself.

        Returns:
            bool: True if at least one alternative was removed, else False.
        """
        key: Shape = make_shape(*shape)
        with self._lock:
            current = self._table.get(key, ())
            kept = tuple(
                e for e in current if not (e.name == which or e.procedure is which)
            )
            if len(kept) == len(current):
                return False
            if kept:
                self._table[key] = kept
            else:
                del self._table[key]
        logger.debug("Unregistered renderer %r for %s/%d", which, key[0], key[1])
        return True

    def clear(self) -> None:
        """Remove all registered renderers."""
        with self._lock:
            self._table.clear()

    # --- Read-only views ---

    def alternatives(self, shape: Shape) -> tuple[RendererEntry, ...]:
        """Return the registered alternatives for ``shape`` in trial order."""
        with self._lock:
            return self._table.get(tuple(shape), ())  # type: ignore[arg-type]

    def shapes(self) -> tuple[Shape, ...]:
        """Return all shapes with at least one renderer (sorted)."""
        with self._lock:
            return tuple(sorted(self._table))

    def is_registered(self, shape: Shape) -> bool:
        """Return True if at least one renderer exists for ``shape``."""
        return bool(self.alternatives(shape))

    def copy(self) -> RendererRegistry:
        """Return an independent registry with the same alternatives."""
        clone = RendererRegistry()
        with self._lock:
            clone._table = dict(self._table)
        return clone

    # --- Resolution ---

    def try_resolve(self, message: Message) -> TokenSeq | None:
        """Return tokens from the first applicable alternative, or None.

        Args:
            message (Message): The message to render.

        Returns:
            TokenSeq | None: The first non-empty token tuple produced, or ``None``
                when no alternative applies.
        """
        for entry in self.alternatives(message.shape):
            try:
                result = entry.procedure(message)
                tokens: TokenSeq = as_tokens(result) if result is not None else ()
            except NotApplicable:
                logger.trace("Renderer %s declined %s", entry.name, message)
                continue
            except Exception as exc:
                logger.debug(
                    "Renderer %s failed on %s: %s", entry.name, message, exc, exc_info=True
                )
                continue
            if tokens:
                logger.trace("Renderer %s produced %d tokens", entry.name, len(tokens))
                return tokens
            logger.trace("Renderer %s produced no tokens for %s", entry.name, message)
        return None

    def resolve(self, message: Message) -> TokenSeq:
        """Return the tokens for ``message``, using the fallback when nothing applies."""
        tokens = self.try_resolve(message)
        if tokens is None:
            logger.debug("No renderer applies to %s; using fallback", message)
            return unknown_message_tokens(message)
        return tokens
