# topmark:header:start
#
#   project      : Tidings
#   file         : __init__.py
#   file_relpath : src/tidings/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Message pipeline: resolve -> hooks -> emit.

Data flows strictly forward: semantic message -> tokens -> (hooks, else)
printed lines. See `tidings.pipeline.coordinator` for the step contract and
`tidings.pipeline.default` for the process-wide convenience API.
"""

from __future__ import annotations

from tidings.pipeline.coordinator import MessagePipeline, SourceLocation, degraded_tokens
from tidings.pipeline.default import (
    build_pipeline,
    get_pipeline,
    message_to_string,
    print_message,
    print_message_lines,
    set_pipeline,
)

__all__ = [
    "MessagePipeline",
    "SourceLocation",
    "build_pipeline",
    "degraded_tokens",
    "get_pipeline",
    "message_to_string",
    "print_message",
    "print_message_lines",
    "set_pipeline",
]
