# topmark:header:start
#
#   project      : Tidings
#   file         : errors.py
#   file_relpath : src/tidings/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the Tidings library.

Usage:
    Library code raises these exceptions where the caller can act on them.
    Failures that must never reach the caller (renderer or hook errors) are
    contained and logged by the registry and hook chain instead.

Taxonomy:
    * `TidingsError`: base class for all library errors.
    * `RegistrationError`: invalid renderer/hook registration (bad shape,
      non-callable procedure).
    * `ConfigError`: malformed configuration sources or kind properties.
    * `EmitError`: the destination stream rejected a write; the condition
      could not be reported at all.
    * `NotApplicable`: control flow for renderers, not an error. A renderer
      raises it to let the next alternative for the same shape try.
"""

from __future__ import annotations


class TidingsError(Exception):
    """Base class for all Tidings errors."""


class RegistrationError(TidingsError, ValueError):
    """Error for invalid renderer or hook registrations."""


class ConfigError(TidingsError):
    """Error for configuration errors (missing/invalid/malformed config)."""


class EmitError(TidingsError):
    """Error when a destination stream cannot be written or flushed.

    Attributes:
        destination (str): Human-readable name of the failing destination.
    """

    def __init__(self, message: str, *, destination: str = "") -> None:
        super().__init__(message)
        self.destination = destination


class NotApplicable(Exception):
    """Raised by a renderer to signal that it does not handle a message.

    The renderer registry catches it and tries the next alternative registered
    for the same shape.
    """
