# topmark:header:start
#
#   project      : Tidings
#   file         : color.py
#   file_relpath : src/tidings/config/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent color resolution for Tidings.

Decides whether message output may carry ANSI styling, based on an explicit
mode, the environment and TTY detection. Kept free of Click so the library
pipeline and the CLI share one policy.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from tidings.config.logging import get_logger

if TYPE_CHECKING:
    from typing import TextIO

    from tidings.config.logging import TidingsLogger


logger: TidingsLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when the stream is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stream: TextIO | None = None,
    isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Override**: `ALWAYS` -> True; `NEVER` -> False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) -> True
            - `NO_COLOR` (set to any value) -> False
        3. **Auto**: whether ``stream`` (default ``sys.stdout``) is a TTY.

    Args:
        color_mode_override: Explicit mode; `None` means "not provided".
        stream: Stream whose TTY status decides the auto mode.
        isatty: Optional override for TTY detection.

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if isatty is None:
        target = stream if stream is not None else sys.stdout
        try:
            isatty = target.isatty()
        except (AttributeError, OSError, ValueError):
            isatty = False
    logger.trace("Color auto-detection: isatty=%s", isatty)
    return bool(isatty)
