# topmark:header:start
#
#   project      : Tidings
#   file         : test_kinds.py
#   file_relpath : tests/config/test_kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for kind names and the kind -> properties lookup."""

from __future__ import annotations

import pytest

from tests.conftest import parametrize
from tidings.config.kinds import (
    DEFAULT_KIND_PROPERTIES,
    FALLBACK_PROPERTIES,
    Kind,
    KindProperties,
    KindTable,
    Stream,
    kind_name,
    properties_from_table,
    split_kind,
)
from tidings.core.errors import ConfigError


@parametrize(
    "kind,expected",
    [
        ("warning", ("warning", None)),
        ("debug:io", ("debug", "io")),
        ("debug:", ("debug", None)),
        (Kind.ERROR, ("error", None)),
    ],
)
def test_split_kind(kind: str, expected: tuple[str, str | None]) -> None:
    assert split_kind(kind) == expected


def test_kind_name_of_enum() -> None:
    assert kind_name(Kind.BANNER) == "banner"
    assert kind_name("custom") == "custom"


def test_defaults_cover_builtin_kinds() -> None:
    """Every built-in kind has default properties."""
    assert set(DEFAULT_KIND_PROPERTIES) == {k.value for k in Kind}
    assert DEFAULT_KIND_PROPERTIES["error"].label == "ERROR: "
    assert DEFAULT_KIND_PROPERTIES["help"].stream is Stream.STDOUT
    assert DEFAULT_KIND_PROPERTIES["silent"].enabled is False


def test_lookup_order() -> None:
    """Full kind first, then its base, then the fallback."""
    table = KindTable({"debug:io": KindProperties(label="IO: ")})
    assert table.lookup("debug:io").label == "IO: "
    assert table.lookup("debug:net") == DEFAULT_KIND_PROPERTIES["debug"]
    assert table("progress") is FALLBACK_PROPERTIES


def test_from_toml_table_merges_with_defaults() -> None:
    """Overrides keep unspecified properties of the built-in kind."""
    table = KindTable.from_toml_table(
        {
            "warning": {"label": "WARN: "},
            "debug:io": {"stream": "stdout"},
            "progress": {"label": "... "},
        }
    )
    warning = table.lookup("warning")
    assert warning.label == "WARN: "
    assert warning.color == "yellow"
    assert warning.location is True

    debug_io = table.lookup("debug:io")
    assert debug_io.stream is Stream.STDOUT
    assert debug_io.label == "% "

    assert table.lookup("progress").label == "... "
    assert "progress" in table.kinds()


@parametrize(
    "table",
    [
        {"label": 3},
        {"colour": "red"},
        {"stream": "stdnull"},
        {"wait": "yes"},
    ],
)
def test_properties_from_table_errors(table: dict[str, object]) -> None:
    """Invalid keys and values raise ConfigError."""
    with pytest.raises(ConfigError):
        properties_from_table("warning", table)


def test_kind_entry_must_be_table() -> None:
    with pytest.raises(ConfigError):
        KindTable.from_toml_table({"warning": "loud"})


def test_to_dict_is_json_friendly() -> None:
    data = KindTable().to_dict()
    assert data["query"]["stream"] == "stdout"
    assert list(data) == sorted(data)
