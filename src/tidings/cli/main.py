# topmark:header:start
#
#   project      : Tidings
#   file         : main.py
#   file_relpath : src/tidings/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tidings command-line interface.

Key ideas:
- Group-level options are resolved once and placed into ``ctx.obj``
  (console, pipeline config, verbosity, color).
- Subcommands build their pipeline from that shared state.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

import click

from tidings.cli.commands.kinds import kinds_command
from tidings.cli.commands.render import render_command
from tidings.cli.commands.version import version_command
from tidings.cli.console import ClickConsole
from tidings.cli.errors import TidingsConfigError
from tidings.cli.options import (
    common_color_options,
    common_config_options,
    common_verbose_options,
    pipeline_verbosity,
    resolve_verbosity,
)
from tidings.config.color import ColorMode, resolve_color_mode
from tidings.config.io import discover_config, load_config
from tidings.config.logging import get_logger, resolve_env_log_level, setup_logging
from tidings.config.model import PipelineConfig
from tidings.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from tidings.cli.console_api import ConsoleLike

logger = get_logger(__name__)


def resolve_pipeline_config(
    *,
    config_path: Path | None,
    no_config: bool,
) -> PipelineConfig:
    """Return the pipeline config from ``--config``, discovery, or defaults.

    Raises:
        TidingsConfigError: If the selected config file is invalid.
    """
    path = config_path if config_path is not None else (None if no_config else discover_config())
    if path is None:
        return PipelineConfig()
    try:
        config = load_config(path)
    except ConfigError as exc:
        raise TidingsConfigError(str(exc)) from exc
    logger.info("Loaded config from %s", path)
    return config


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_path: Path | None,
    no_config: bool,
    debug_topics: tuple[str, ...],
) -> None:
    """Initialize shared state (verbosity, color, config) on the Click context."""
    ctx.obj = ctx.obj or {}

    level_cli = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # Internal logging is configured via env, independent of -v/-q
    setup_logging(level=resolve_env_log_level())

    config = resolve_pipeline_config(config_path=config_path, no_config=no_config)
    if no_color:
        config = replace(config, color_mode=ColorMode.NEVER)
    elif color_mode is not None:
        config = replace(config, color_mode=ColorMode(color_mode))
    if level_cli < 0:
        config = replace(config, verbosity=pipeline_verbosity(level_cli))
    if debug_topics:
        config = config.with_debug_topics(debug_topics)
    ctx.obj["config"] = config

    enable_color = resolve_color_mode(color_mode_override=config.color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Tidings CLI: render structured messages.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_path: Path | None,
    no_config: bool,
    debug_topics: tuple[str, ...],
) -> None:
    """Entry point for the Tidings CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_path=config_path,
        no_config=no_config,
        debug_topics=debug_topics,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'tidings render KIND TAG [ARGS...]' to print a message.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(kinds_command)

cli.add_command(render_command)

if __name__ == "__main__":
    cli()
