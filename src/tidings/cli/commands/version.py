# topmark:header:start
#
#   project      : Tidings
#   file         : version.py
#   file_relpath : src/tidings/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tidings `version` command.

Prints the current Tidings version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from tidings.constants import TIDINGS_VERSION

if TYPE_CHECKING:
    from tidings.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Tidings.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (text, json).",
)
def version_command(*, output_format: str = "text") -> None:
    """Show the current version of Tidings."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if output_format == "json":
        console.print(json.dumps({"version": TIDINGS_VERSION}))
    elif ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("Tidings version:", bold=True, underline=True))
        console.print(f"    {console.styled(TIDINGS_VERSION, bold=True)}")
    else:
        console.print(console.styled(TIDINGS_VERSION, bold=True))
