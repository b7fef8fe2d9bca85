"""The installed version of this package."""

from __future__ import annotations

from importlib import metadata

_DISTRIBUTION = "civoapi"

DEFAULT_VERSION = "dev"


def get_version() -> str:
    """Return the installed distribution's version, or "dev" when not installed."""
    try:
        return metadata.version(_DISTRIBUTION) or DEFAULT_VERSION
    except metadata.PackageNotFoundError:
        return DEFAULT_VERSION