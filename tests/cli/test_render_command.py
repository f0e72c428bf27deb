# topmark:header:start
#
#   project      : Tidings
#   file         : test_render_command.py
#   file_relpath : tests/cli/test_render_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `tidings render`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
    run_cli_in,
)
from tests.conftest import mark_cli, parametrize
from tidings.cli.commands.render import coerce_arg

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@parametrize(
    "value,expected",
    [("42", 42), ("-3", -3), ("1.5", 1.5), ("SKT-9", "SKT-9"), ("1.2.3", "1.2.3")],
)
def test_coerce_arg(value: str, expected: object) -> None:
    assert coerce_arg(value) == expected


@mark_cli
def test_render_generic_part() -> None:
    result: Result = run_cli(["--no-config", "render", "warning", "no_such_part", "42"])
    assert_SUCCESS(result)
    assert "Warning: Part 42 is not defined or used\n" in result.output


@mark_cli
def test_render_enriched_part(tmp_path: Path) -> None:
    parts = tmp_path / "parts.toml"
    parts.write_text('[parts]\n42 = "SKT-9"\n', encoding="utf-8")
    result: Result = run_cli(
        ["--no-config", "render", "warning", "no_such_part", "42", "--parts", str(parts)]
    )
    assert_SUCCESS(result)
    assert "Warning: Part 42 is not defined or used in product SKT-9" in result.output


@mark_cli
def test_render_string_mode() -> None:
    result: Result = run_cli(
        ["--no-config", "render", "--string", "error", "goal_failed", "load_config"]
    )
    assert_SUCCESS(result)
    assert result.output == "Goal failed: load_config\n"


@mark_cli
def test_render_location() -> None:
    result: Result = run_cli(
        ["--no-config", "render", "error", "halt", "--location", "parts.toml:3"]
    )
    assert_SUCCESS(result)
    assert "ERROR: parts.toml:3: Halting" in result.output


@mark_cli
def test_render_bad_location() -> None:
    result: Result = run_cli(["--no-config", "render", "error", "halt", "--location", "nowhere"])
    assert_USAGE_ERROR(result)


@mark_cli
def test_render_unknown_message() -> None:
    result: Result = run_cli(["--no-config", "render", "informational", "mystery", "1", "x"])
    assert_SUCCESS(result)
    assert "% Unknown message: mystery(1, 'x')" in result.output


@mark_cli
def test_quiet_suppresses_informational() -> None:
    result: Result = run_cli(["--no-config", "-q", "render", "informational", "halt"])
    assert_SUCCESS(result)
    assert result.output == ""


@mark_cli
def test_debug_topic_gate() -> None:
    hidden: Result = run_cli(["--no-config", "render", "debug:io", "halt"])
    shown: Result = run_cli(["--no-config", "--debug", "io", "render", "debug:io", "halt"])
    assert_SUCCESS(hidden)
    assert_SUCCESS(shown)
    assert hidden.output == ""
    assert "% Halting" in shown.output


@mark_cli
def test_render_uses_discovered_config(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.tidings.kinds.warning]\nlabel = "WARN: "\n', encoding="utf-8"
    )
    result: Result = run_cli_in(tmp_path, ["render", "warning", "halt"])
    assert_SUCCESS(result)
    assert "WARN: Halting" in result.output


@mark_cli
def test_render_bad_parts_file(tmp_path: Path) -> None:
    parts = tmp_path / "parts.toml"
    parts.write_text("[parts]\n42 = 7\n", encoding="utf-8")
    result: Result = run_cli_in(
        tmp_path, ["--no-config", "render", "warning", "no_such_part", "42", "--parts", str(parts)]
    )
    assert_CONFIG_ERROR(result)
