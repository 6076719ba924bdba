"""
Environment configuration for classenum tooling.

Environment variables:
    CLASSENUM_LOG_LEVEL: Logging level name for the CLI (default: WARNING)
    CLASSENUM_ENUM: Default ``module:attribute`` path of the enumeration
        the CLI operates on (default: classenum.example:MyEnum)

Usage:
    from classenum.core.environment import configure_logging, get_default_enum_path

    configure_logging()          # level from CLASSENUM_LOG_LEVEL
    configure_logging("DEBUG")   # explicit level wins
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_VAR = "CLASSENUM_LOG_LEVEL"
ENUM_PATH_VAR = "CLASSENUM_ENUM"

_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_ENUM_PATH = "classenum.example:MyEnum"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_VALID_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def get_log_level(override: str | None = None) -> int:
    """Resolve the logging level from an explicit value or CLASSENUM_LOG_LEVEL.

    Unknown level names fall back to WARNING with a warning.

    Examples:
        >>> get_log_level("debug")
        10
    """
    value = (override or os.environ.get(LOG_LEVEL_VAR, "")).upper().strip()
    if not value:
        value = _DEFAULT_LOG_LEVEL
    if value not in _VALID_LEVELS:
        logging.getLogger(__name__).warning(
            "Unknown log level '%s'. Valid values: %s. Defaulting to %s.",
            value,
            ", ".join(_VALID_LEVELS),
            _DEFAULT_LOG_LEVEL,
        )
        value = _DEFAULT_LOG_LEVEL
    return getattr(logging, value)


def get_default_enum_path() -> str:
    """Return the enumeration path the CLI uses when --enum is not given."""
    return os.environ.get(ENUM_PATH_VAR, "").strip() or _DEFAULT_ENUM_PATH


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for command line use."""
    logging.basicConfig(level=get_log_level(level), format=LOG_FORMAT)
