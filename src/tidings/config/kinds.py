# topmark:header:start
#
#   project      : Tidings
#   file         : kinds.py
#   file_relpath : src/tidings/config/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Message kinds and their display properties.

A *kind* classifies a report (``error``, ``warning``, ...) independently of
the message shape. How a kind is displayed is decided by a property lookup
``kind -> KindProperties``, never by code branching on the kind.

Sections:
    * Kind: names of the built-in kinds. Any other string is a valid kind too.
    * KindProperties: label, color, stream, wait, location and enabled flags.
    * KindTable: defaults merged with overrides (e.g. from TOML).

Debug kinds may carry a topic: ``debug:<topic>``. Lookups first try the full
kind, then its base (``debug``), then the fallback properties.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields, replace
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from tidings.config.logging import get_logger
from tidings.core.errors import ConfigError

if TYPE_CHECKING:
    from tidings.config.logging import TidingsLogger

logger: TidingsLogger = get_logger(__name__)

TOPIC_SEPARATOR: str = ":"


class Kind(str, Enum):
    """Built-in message kinds.

    The pipeline accepts any string as kind; members of this enum are the
    kinds with default properties.
    """

    ERROR = "error"
    WARNING = "warning"
    INFORMATIONAL = "informational"
    BANNER = "banner"
    HELP = "help"
    QUERY = "query"
    SILENT = "silent"
    DEBUG = "debug"


class Stream(str, Enum):
    """Standard stream a kind is written to."""

    STDOUT = "stdout"
    STDERR = "stderr"


def kind_name(kind: str | Kind) -> str:
    """Return the plain string name of a kind (enum members use their value)."""
    if isinstance(kind, Enum):
        return str(kind.value)
    return str(kind)


def split_kind(kind: str | Kind) -> tuple[str, str | None]:
    """Split ``debug:<topic>`` into ``("debug", "<topic>")``.

    Kinds without a topic return ``(kind, None)``.
    """
    name = kind_name(kind)
    base, sep, topic = name.partition(TOPIC_SEPARATOR)
    if not sep or not topic:
        return base, None
    return base, topic


@dataclass(frozen=True)
class KindProperties:
    """Display properties of a message kind.

    Attributes:
        label (str): Prefix written at the start of each line (e.g. ``"ERROR: "``).
        color (str | None): ``click.style`` foreground color for the whole message.
        stream (Stream): Standard stream the message is written to.
        wait (bool): Pause for the user after display (interactive terminals only).
        location (bool): Include ``path:line`` in the prefix when a location is known.
        enabled (bool): Whether messages of this kind are printed at all.
    """

    label: str = ""
    color: str | None = None
    stream: Stream = Stream.STDERR
    wait: bool = False
    location: bool = False
    enabled: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of the properties."""
        data = asdict(self)
        data["stream"] = self.stream.value
        return data


DEFAULT_KIND_PROPERTIES: Mapping[str, KindProperties] = MappingProxyType(
    {
        Kind.ERROR.value: KindProperties(label="ERROR: ", color="red", location=True),
        Kind.WARNING.value: KindProperties(label="Warning: ", color="yellow", location=True),
        Kind.INFORMATIONAL.value: KindProperties(label="% "),
        Kind.BANNER.value: KindProperties(),
        Kind.HELP.value: KindProperties(stream=Stream.STDOUT),
        Kind.QUERY.value: KindProperties(stream=Stream.STDOUT),
        Kind.SILENT.value: KindProperties(enabled=False),
        Kind.DEBUG.value: KindProperties(label="% ", color="blue"),
    }
)

FALLBACK_PROPERTIES: KindProperties = KindProperties()

_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "label": (str,),
    "color": (str,),
    "stream": (str,),
    "wait": (bool,),
    "location": (bool,),
    "enabled": (bool,),
}


def properties_from_table(
    name: str,
    table: Mapping[str, Any],
    *,
    base: KindProperties = FALLBACK_PROPERTIES,
) -> KindProperties:
    """Build `KindProperties` from a TOML-like table, starting from ``base``.

    Args:
        name (str): Kind name (used in error messages).
        table (Mapping[str, Any]): Keys matching `KindProperties` fields.
        base (KindProperties): Properties the table overrides.

    Returns:
        KindProperties: The merged properties.

    Raises:
        ConfigError: On unknown keys, wrong value types or an unknown stream.
    """
    known = {f.name for f in fields(KindProperties)}
    changes: dict[str, Any] = {}
    for key, value in table.items():
        if key not in known:
            raise ConfigError(f"Unknown property '{key}' for kind '{name}'")
        if not isinstance(value, _FIELD_TYPES[key]):
            raise ConfigError(
                f"Property '{key}' of kind '{name}' must be "
                f"{_FIELD_TYPES[key][0].__name__}, got {type(value).__name__}"
            )
        if key == "stream":
            try:
                value = Stream(value)
            except ValueError as exc:
                raise ConfigError(
                    f"Property 'stream' of kind '{name}' must be 'stdout' or 'stderr', "
                    f"got {value!r}"
                ) from exc
        changes[key] = value
    return replace(base, **changes)


class KindTable:
    """Kind -> properties lookup: built-in defaults plus overrides."""

    def __init__(self, overrides: Mapping[str, KindProperties] | None = None) -> None:
        table: dict[str, KindProperties] = dict(DEFAULT_KIND_PROPERTIES)
        if overrides:
            table.update(overrides)
        self._table = table

    @classmethod
    def from_toml_table(cls, kinds: Mapping[str, Any]) -> KindTable:
        """Build a table from a ``[kinds]`` TOML table.

        Each sub-table overrides the built-in defaults of the kind with the same
        name (or of its base kind for ``debug:<topic>`` entries).

        Raises:
            ConfigError: If an entry is not a table or has invalid properties.
        """
        overrides: dict[str, KindProperties] = {}
        for name, table in kinds.items():
            if not isinstance(table, Mapping):
                raise ConfigError(f"Kind '{name}' must be a table, got {type(table).__name__}")
            base_name, _topic = split_kind(name)
            base = DEFAULT_KIND_PROPERTIES.get(
                name, DEFAULT_KIND_PROPERTIES.get(base_name, FALLBACK_PROPERTIES)
            )
            overrides[name] = properties_from_table(name, table, base=base)
            logger.debug("Kind '%s' overridden: %s", name, overrides[name])
        return cls(overrides)

    def lookup(self, kind: str | Kind) -> KindProperties:
        """Return the display properties for ``kind``."""
        name = kind_name(kind)
        props = self._table.get(name)
        if props is not None:
            return props
        base, _topic = split_kind(name)
        return self._table.get(base, FALLBACK_PROPERTIES)

    __call__ = lookup

    def kinds(self) -> tuple[str, ...]:
        """Return the names of all kinds with explicit properties (sorted)."""
        return tuple(sorted(self._table))

    def as_mapping(self) -> Mapping[str, KindProperties]:
        """Return a read-only mapping of kind name -> properties."""
        return MappingProxyType(self._table)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Return a JSON-friendly mapping of all kinds."""
        return {name: self._table[name].to_dict() for name in self.kinds()}
