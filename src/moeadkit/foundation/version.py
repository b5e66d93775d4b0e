"""Installed distribution version of moeadkit."""

from __future__ import annotations

from functools import lru_cache
from importlib import metadata as importlib_metadata

DISTRIBUTION = "moeadkit"
UNKNOWN_VERSION = "0.0.0+unknown"


@lru_cache(maxsize=1)
def get_version() -> str:
    # source checkouts that were never installed carry no metadata
    try:
        return importlib_metadata.version(DISTRIBUTION)
    except importlib_metadata.PackageNotFoundError:  # pragma: no cover
        return UNKNOWN_VERSION


__version__ = get_version()

__all__ = ["__version__", "get_version"]
