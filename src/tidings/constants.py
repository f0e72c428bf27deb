# topmark:header:start
#
#   project      : Tidings
#   file         : constants.py
#   file_relpath : src/tidings/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tidings Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    TIDINGS_VERSION: str = get_version("tidings")
except PackageNotFoundError:  # running from a source checkout without installation
    TIDINGS_VERSION = "0.0.0"

# Environment variable consulted for the internal log level:
LOG_LEVEL_ENV: str = "TIDINGS_LOG_LEVEL"

# Configuration sources:
DEFAULT_TOML_CONFIG_NAME: str = "tidings.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: tuple[str, str] = ("tool", "tidings")

VALUE_NOT_SET: str = "<not set>"

# Text used when no renderer applies to a message:
UNKNOWN_MESSAGE_TEMPLATE: str = "Unknown message: {}"
