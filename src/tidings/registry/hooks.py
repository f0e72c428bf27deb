# topmark:header:start
#
#   project      : Tidings
#   file         : hooks.py
#   file_relpath : src/tidings/registry/hooks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hook chain: interceptors that may claim a rendered message.

A hook receives ``(message, kind, tokens)`` and returns ``True`` when it has
fully handled the message; the pipeline then skips default printing.

Two independently ordered chains exist:
    * a *context* chain, stored in a ``ContextVar``: visible only to the
      thread or asyncio task that registered it;
    * a *process* chain, shared by all contexts, mutated under a lock and
      read from a snapshot.

The context chain is consulted first. A hook that raises is logged and
counts as "not handled"; it never aborts dispatch.

Typical usage:
    ```python
    chain = HookChain()
    captured: list[Message] = []

    def capture(message, kind, tokens) -> bool:
        captured.append(message)
        return True

    with chain.scoped(capture):
        pipeline.process("warning", Message("no_such_part", 42))
    ```
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from itertools import count
from threading import Lock
from typing import TYPE_CHECKING

from tidings.config.logging import get_logger
from tidings.core.errors import RegistrationError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from tidings.config.logging import TidingsLogger
    from tidings.message.model import Message
    from tidings.message.tokens import TokenSeq

    HookProc = Callable[[Message, str, TokenSeq], object]

logger: TidingsLogger = get_logger(__name__)

_chain_ids = count()


@dataclass(frozen=True)
class HookEntry:
    """One registered hook."""

    procedure: HookProc
    name: str

    def matches(self, which: str | HookProc) -> bool:
        """Return True if ``which`` names this entry or is its procedure."""
        return self.name == which or self.procedure is which


def _make_entry(hook: HookProc, name: str | None) -> HookEntry:
    if not callable(hook):
        raise RegistrationError(f"Hook is not callable: {hook!r}")
    return HookEntry(
        procedure=hook,
        name=name or getattr(hook, "__qualname__", None) or repr(hook),
    )


class HookChain:
    """Context-scoped and process-wide hook chains with ordered dispatch."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._global: tuple[HookEntry, ...] = ()
        self._local: ContextVar[tuple[HookEntry, ...]] = ContextVar(
            f"tidings_hooks_{next(_chain_ids)}", default=()
        )

    # --- Process-wide chain ---

    def register_global(self, hook: HookProc, *, name: str | None = None) -> HookEntry:
        """Append a hook to the process-wide chain.

        Raises:
            RegistrationError: If ``hook`` is not callable.
        """
        entry = _make_entry(hook, name)
        with self._lock:
            self._global = (*self._global, entry)
        logger.debug("Registered process hook %s", entry.name)
        return entry

    def unregister_global(self, which: str | HookProc) -> bool:
        """Remove matching hooks from the process-wide chain."""
        with self._lock:
            kept = tuple(e for e in self._global if not e.matches(which))
            removed = len(kept) != len(self._global)
            self._global = kept
        return removed

    def global_hooks(self) -> tuple[HookEntry, ...]:
        """Return a snapshot of the process-wide chain."""
        return self._global

    # --- Context chain ---

    def register_local(self, hook: HookProc, *, name: str | None = None) -> HookEntry:
        """Append a hook to the chain of the current thread/task only.

        Raises:
            RegistrationError: If ``hook`` is not callable.
        """
        entry = _make_entry(hook, name)
        self._local.set((*self._local.get(), entry))
        logger.debug("Registered context hook %s", entry.name)
        return entry

    def unregister_local(self, which: str | HookProc) -> bool:
        """Remove matching hooks from the current context's chain."""
        current = self._local.get()
        kept = tuple(e for e in current if not e.matches(which))
        self._local.set(kept)
        return len(kept) != len(current)

    def local_hooks(self) -> tuple[HookEntry, ...]:
        """Return the current context's chain."""
        return self._local.get()

    @contextmanager
    def scoped(self, hook: HookProc, *, name: str | None = None) -> Iterator[HookEntry]:
        """Register a context hook for the duration of a ``with`` block."""
        entry = _make_entry(hook, name)
        token = self._local.set((*self._local.get(), entry))
        try:
            yield entry
        finally:
            self._local.reset(token)

    def clear(self) -> None:
        """Drop the process-wide chain and the current context's chain."""
        with self._lock:
            self._global = ()
        self._local.set(())

    # --- Dispatch ---

    def dispatch(self, message: Message, kind: str, tokens: TokenSeq) -> bool:
        """Offer a rendered message to the hooks.

        Args:
            message (Message): The semantic message.
            kind (str): Normalized message kind.
            tokens (TokenSeq): The resolved tokens.

        Returns:
            bool: True if a hook handled the message.
        """
        for scope, entries in (("context", self._local.get()), ("process", self._global)):
            for entry in entries:
                if self._call(entry, scope, message, kind, tokens):
                    logger.trace("Hook %s (%s) handled %s", entry.name, scope, message)
                    return True
        return False

    @staticmethod
    def _call(
        entry: HookEntry,
        scope: str,
        message: Message,
        kind: str,
        tokens: TokenSeq,
    ) -> bool:
        try:
            return entry.procedure(message, kind, tokens) is True
        except Exception as exc:
            logger.warning("Hook %s (%s) failed on %s: %s", entry.name, scope, message, exc)
            logger.debug("Hook failure details", exc_info=True)
            return False
