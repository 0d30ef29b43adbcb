"""Version and build information reporting."""

from __future__ import annotations

import platform
from importlib.metadata import PackageNotFoundError, version

DIST_NAME = "belgianlake"
FALLBACK_VERSION = "0.0.0"


def get_version() -> str:
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return FALLBACK_VERSION


def build_info() -> str:
    """Return a one-line ``name version (python x.y.z)`` description."""
    return f"{DIST_NAME} {get_version()} (python {platform.python_version()})"
