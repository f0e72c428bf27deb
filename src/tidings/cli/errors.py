# topmark:header:start
#
#   project      : Tidings
#   file         : errors.py
#   file_relpath : src/tidings/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Tidings CLI.

Usage:
    Commands translate library errors (`tidings.core.errors`) into these
    exceptions so Click prints a short message and exits with a sysexits code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from tidings.cli.exit_codes import ExitCode


class TidingsCliError(click.ClickException):
    """Base class for all Tidings CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is not None:
            console.error(console.styled(self.format_message(), fg="bright_red"))
            return
        super().show(file)


class TidingsUsageError(TidingsCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TidingsConfigError(TidingsCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class TidingsEmitError(TidingsCliError):
    """Error when a message could not be written to its stream."""

    exit_code = ExitCode.IO_ERROR
