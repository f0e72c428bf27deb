# topmark:header:start
#
#   project      : Tidings
#   file         : kinds.py
#   file_relpath : src/tidings/cli/commands/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tidings `kinds` command.

Shows the effective kind table (built-in defaults merged with the loaded
configuration): label, color, stream and flags of every kind.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from tidings.cli.console_api import ConsoleLike
    from tidings.config.kinds import KindProperties
    from tidings.config.model import PipelineConfig


def _flags(props: KindProperties) -> str:
    flags = [
        name
        for name, on in (
            ("wait", props.wait),
            ("location", props.location),
            ("disabled", not props.enabled),
        )
        if on
    ]
    return ",".join(flags) or "-"


@click.command(
    name="kinds",
    help="List message kinds and their display properties.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (text, json).",
)
def kinds_command(*, output_format: str = "text") -> None:
    """List message kinds and their display properties."""
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]
    config: PipelineConfig = ctx.obj["config"]

    if output_format == "json":
        console.print(json.dumps(config.to_dict(), indent=2))
        return

    table = config.kinds.as_mapping()
    width = max(len(name) for name in table)
    header = f"{'KIND':<{width}}  LABEL        COLOR    STREAM  FLAGS"
    console.print(console.styled(header, bold=True))
    for name in config.kinds.kinds():
        props = table[name]
        label = repr(props.label)
        color = props.color or "-"
        name_text = f"{name:<{width}}"
        if props.color:
            name_text = console.styled(name_text, fg=props.color)
        console.print(
            f"{name_text}  {label:<11}  {color:<7}  {props.stream.value:<6}  {_flags(props)}"
        )
    if config.debug_topics:
        console.print()
        console.print(f"Debug topics: {', '.join(sorted(config.debug_topics))}")
