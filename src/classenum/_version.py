"""Installed version of classenum."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION = "classenum"

# Reported when running from a checkout that was never installed
UNKNOWN_VERSION = "0.0.0"


def get_version() -> str:
    """Return the version recorded in the installed distribution metadata."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return UNKNOWN_VERSION
