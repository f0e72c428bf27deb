# topmark:header:start
#
#   project      : Tidings
#   file         : model.py
#   file_relpath : src/tidings/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline configuration model.

`PipelineConfig` is an immutable snapshot of the settings that decide how the
pipeline prints messages. It is built from code defaults, optionally merged
with a TOML source (see `tidings.config.io`).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any

from tidings.config.color import ColorMode
from tidings.config.kinds import Kind, KindTable

if TYPE_CHECKING:
    from collections.abc import Iterable


class Verbosity(str, Enum):
    """How chatty the pipeline is.

    Attributes:
        NORMAL: Print every enabled kind.
        SILENT: Suppress informational and banner messages (hooks still see them).
    """

    NORMAL = "normal"
    SILENT = "silent"


#: Kinds suppressed when verbosity is `Verbosity.SILENT`.
QUIET_KINDS: frozenset[str] = frozenset({Kind.INFORMATIONAL.value, Kind.BANNER.value})


@dataclass(frozen=True)
class PipelineConfig:
    """Immutable pipeline settings.

    Attributes:
        kinds (KindTable): Kind -> display properties lookup.
        verbosity (Verbosity): Global verbosity.
        debug_topics (frozenset[str]): Debug topics enabled at startup.
        show_thread (bool): Include the thread name in every prefix.
        color_mode (ColorMode): Color policy for output streams.
    """

    kinds: KindTable = field(default_factory=KindTable)
    verbosity: Verbosity = Verbosity.NORMAL
    debug_topics: frozenset[str] = frozenset()
    show_thread: bool = False
    color_mode: ColorMode = ColorMode.AUTO

    def with_debug_topics(self, topics: Iterable[str]) -> PipelineConfig:
        """Return a copy with additional debug topics enabled."""
        return replace(self, debug_topics=self.debug_topics | frozenset(topics))

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "verbosity": self.verbosity.value,
            "debug_topics": sorted(self.debug_topics),
            "show_thread": self.show_thread,
            "color_mode": self.color_mode.value,
            "kinds": self.kinds.to_dict(),
        }
