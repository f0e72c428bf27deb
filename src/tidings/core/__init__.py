# topmark:header:start
#
#   project      : Tidings
#   file         : __init__.py
#   file_relpath : src/tidings/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core primitives shared by all Tidings layers.

This package holds the exception hierarchy. It has no dependencies on the
message, registry, or emitter layers so that any of them may import it.
"""

from __future__ import annotations

from tidings.core.errors import (
    ConfigError,
    EmitError,
    NotApplicable,
    RegistrationError,
    TidingsError,
)

__all__ = [
    "ConfigError",
    "EmitError",
    "NotApplicable",
    "RegistrationError",
    "TidingsError",
]
