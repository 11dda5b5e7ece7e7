"""Filesystem helpers shared by adapters."""

from __future__ import annotations

import os


def path_exists(path: str) -> bool:
    """Return whether ``path`` names an existing file or directory.

    Symlinks are followed. Permission errors and malformed paths
    (for example an embedded NUL) are reported as missing.
    """
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


__all__ = ["path_exists"]
