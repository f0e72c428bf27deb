# topmark:header:start
#
#   project      : Tidings
#   file         : render.py
#   file_relpath : src/tidings/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tidings `render` command.

Reports one message through a pipeline built from the CLI configuration and
the built-in catalog (plus the inventory catalog, optionally enriched from a
``--parts`` TOML file).

Examples:
    ```console
    $ tidings render warning no_such_part 42 --parts parts.toml
    Warning: Part 42 is not defined or used in product SKT-9
    $ tidings render --string error goal_failed load_config
    Goal failed: load_config
    ```
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from tidings.catalog import load_parts_table, register_inventory_messages
from tidings.cli.errors import TidingsConfigError, TidingsEmitError, TidingsUsageError
from tidings.config.logging import get_logger
from tidings.core.errors import ConfigError, EmitError
from tidings.message.model import Message
from tidings.pipeline.coordinator import SourceLocation
from tidings.pipeline.default import build_pipeline

if TYPE_CHECKING:
    from tidings.cli.console_api import ConsoleLike
    from tidings.config.model import PipelineConfig

logger = get_logger(__name__)

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+\.\d*|\.\d+)([eE][+-]?\d+)?$")
_LOCATION_RE = re.compile(r"^(?P<path>.+):(?P<line>\d+)$")


def coerce_arg(value: str) -> object:
    """Convert a command-line argument to int or float when it looks numeric."""
    if _INT_RE.match(value):
        return int(value)
    if _FLOAT_RE.match(value):
        return float(value)
    return value


def parse_location(value: str | None) -> SourceLocation | None:
    """Parse ``PATH:LINE`` into a `SourceLocation`.

    Raises:
        TidingsUsageError: If the value is not of the form ``PATH:LINE``.
    """
    if value is None:
        return None
    match = _LOCATION_RE.match(value)
    if match is None:
        raise TidingsUsageError(f"Invalid location {value!r}; expected PATH:LINE")
    return SourceLocation(match["path"], int(match["line"]))


@click.command(
    name="render",
    help="Report one message: KIND (e.g. warning), TAG and its ARGS.",
)
@click.argument("kind")
@click.argument("tag")
@click.argument("args", nargs=-1)
@click.option(
    "--parts",
    "parts_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="TOML file with a [parts] table used to enrich inventory messages.",
)
@click.option(
    "--location",
    default=None,
    metavar="PATH:LINE",
    help="Source location shown in the prefix of kinds that support it.",
)
@click.option(
    "--string",
    "as_string",
    is_flag=True,
    help="Print the rendered text on stdout without prefix, hooks or kind styling.",
)
def render_command(
    *,
    kind: str,
    tag: str,
    args: tuple[str, ...],
    parts_path: Path | None,
    location: str | None,
    as_string: bool,
) -> None:
    """Report one message through the pipeline."""
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]
    config: PipelineConfig = ctx.obj["config"]

    parts: dict[Any, str] = {}
    if parts_path is not None:
        try:
            parts = load_parts_table(parts_path)
        except ConfigError as exc:
            raise TidingsConfigError(str(exc)) from exc

    pipeline = build_pipeline(config, color=ctx.obj.get("color_enabled", False))
    register_inventory_messages(pipeline.renderers, parts)

    message = Message(tag, *(coerce_arg(a) for a in args))
    logger.debug("Rendering %s as %s", message, kind)

    if as_string:
        console.print(pipeline.message_to_string(message))
        return

    try:
        pipeline.process(kind, message, location=parse_location(location))
    except EmitError as exc:
        raise TidingsEmitError(str(exc)) from exc
