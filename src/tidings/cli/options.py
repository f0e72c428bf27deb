# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/tidings/cli/options.py
#   project      : Tidings
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Tidings CLI.

This module centralizes reusable options (verbosity, color, config) and their
resolution logic, so the group and commands can stay thin.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from tidings.cli.errors import TidingsUsageError
from tidings.config.color import ColorMode
from tidings.config.model import Verbosity

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        ``-1`` when quiet, otherwise the number of ``-v`` flags.

    Raises:
        TidingsUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise TidingsUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def pipeline_verbosity(level: int) -> Verbosity:
    """Map program-output verbosity to the pipeline's `Verbosity`."""
    return Verbosity.SILENT if level < 0 else Verbosity.NORMAL


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    ``-q`` silences informational and banner messages; ``-v`` adds detail to
    CLI output. The two are mutually exclusive.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational and banner messages.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --config, --no-config and --debug options to a command."""
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Read settings from this TOML file instead of discovering one.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore tidings.toml / [tool.tidings] in the current directory tree.",
    )(f)
    f = click.option(
        "--debug",
        "debug_topics",
        multiple=True,
        metavar="TOPIC",
        help="Print 'debug:TOPIC' messages (repeatable).",
    )(f)
    return f
