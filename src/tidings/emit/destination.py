# topmark:header:start
#
#   project      : Tidings
#   file         : destination.py
#   file_relpath : src/tidings/emit/destination.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Destination streams for the line emitter.

A `Destination` wraps an already-open text stream. Tidings never opens or
closes streams; it only writes complete blocks and flushes.

Every underlying stream has exactly one write lock, shared by all
`Destination` objects wrapping it, so that concurrent pipeline invocations
writing to the same console never interleave their lines.
"""

from __future__ import annotations

import sys
import weakref
from threading import Lock, RLock
from typing import TextIO

import click

_locks_guard = Lock()
_stream_locks: weakref.WeakKeyDictionary[TextIO, RLock] = weakref.WeakKeyDictionary()
# Streams that cannot be weakly referenced are kept alive by the entry itself.
_pinned_locks: dict[int, tuple[TextIO, RLock]] = {}


def lock_for(stream: TextIO) -> RLock:
    """Return the write lock associated with ``stream``.

    Locks live as long as their stream; a collected stream drops its lock.
    """
    with _locks_guard:
        try:
            lock = _stream_locks.get(stream)
            if lock is None:
                lock = _stream_locks[stream] = RLock()
            return lock
        except TypeError:
            pass
        entry = _pinned_locks.get(id(stream))
        if entry is None:
            entry = _pinned_locks[id(stream)] = (stream, RLock())
        return entry[1]


class Destination:
    """Program-output sink, independent from the logger.

    Args:
        stream (TextIO): Open text stream to write to.
        color (bool): Whether ANSI styling may be emitted on this stream.
        name (str | None): Human-readable name used in error messages.

    Attributes:
        stream (TextIO): The wrapped stream.
        color (bool): Whether styling is applied.
        name (str): Display name.
    """

    def __init__(self, stream: TextIO, *, color: bool = False, name: str | None = None) -> None:
        self.stream = stream
        self.color = color
        self.name = name or getattr(stream, "name", None) or type(stream).__name__

    def __repr__(self) -> str:
        return f"Destination({self.name!r}, color={self.color})"

    @classmethod
    def stdout(cls, *, color: bool = False) -> Destination:
        """Return a destination for the *current* ``sys.stdout``."""
        return cls(sys.stdout, color=color, name="stdout")

    @classmethod
    def stderr(cls, *, color: bool = False) -> Destination:
        """Return a destination for the *current* ``sys.stderr``."""
        return cls(sys.stderr, color=color, name="stderr")

    @property
    def lock(self) -> RLock:
        """Return the write lock shared by all destinations on this stream."""
        return lock_for(self.stream)

    def write(self, text: str) -> None:
        """Write ``text`` as-is (no newline added).

        ANSI codes are stripped by Click when color is disabled.
        """
        click.echo(text, nl=False, file=self.stream, color=self.color)

    def flush(self) -> None:
        """Flush the wrapped stream."""
        self.stream.flush()
