# topmark:header:start
#
#   project      : Tidings
#   file         : test_concurrency.py
#   file_relpath : tests/pipeline/test_concurrency.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Concurrent use of one pipeline from many threads."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

import pytest

from tests.conftest import make_pipeline
from tidings.message.builder import TokenBuilder
from tidings.message.model import Message

if TYPE_CHECKING:
    from tests.conftest import Streams
    from tidings.message.tokens import TokenSeq

pytestmark = pytest.mark.pipeline

N_THREADS = 8
N_MESSAGES = 25


def test_threads_print_whole_messages(streams: Streams) -> None:
    """Multi-line messages printed concurrently never interleave."""
    pipeline = make_pipeline(streams)

    @pipeline.renderers.renderer("report", 2)
    def _report(message: Message) -> TokenSeq:
        worker, seq = message.args
        return (
            TokenBuilder()
            .text("{} {} begin", worker, seq)
            .line("{} {} end", worker, seq)
            .build()
        )

    def run(worker: int) -> None:
        for seq in range(N_MESSAGES):
            pipeline.process("informational", Message("report", worker, seq))

    threads = [threading.Thread(target=run, args=(w,)) for w in range(N_THREADS)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    lines = streams.stderr.splitlines()
    assert len(lines) == 2 * N_THREADS * N_MESSAGES
    for begin, end in zip(lines[::2], lines[1::2]):
        assert begin.endswith(" begin")
        assert end == begin.replace(" begin", " end")


def test_context_hooks_capture_only_own_messages(streams: Streams) -> None:
    """Each thread's scoped hook sees exactly the messages that thread reported."""
    pipeline = make_pipeline(streams)
    captured: dict[int, list[Message]] = {w: [] for w in range(N_THREADS)}
    barrier = threading.Barrier(N_THREADS)

    def run(worker: int) -> None:
        def collect(message: Message, kind: str, tokens: TokenSeq) -> bool:
            captured[worker].append(message)
            return True

        with pipeline.hooks.scoped(collect):
            barrier.wait()
            for seq in range(N_MESSAGES):
                pipeline.process("warning", Message("tick", worker, seq))

    threads = [threading.Thread(target=run, args=(w,)) for w in range(N_THREADS)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    for worker, messages in captured.items():
        assert messages == [Message("tick", worker, seq) for seq in range(N_MESSAGES)]
    assert streams.stderr == ""
