"""src/pathabbrev/features/abbreviation/adapters/filesystem_adapter.py
What: Adapter implementing ExistenceProbe on top of platform helpers.
Why: Keep filesystem I/O in adapters while use cases target abstractions."""

from __future__ import annotations

from pathabbrev.features.abbreviation.usecases.ports import ExistenceProbe
from pathabbrev.platform.filesystem import path_exists


class LocalFilesystemAdapter(ExistenceProbe):
    """Adapter delegating existence checks to the shared platform module."""

    def exists(self, path: str) -> bool:
        return path_exists(path)


__all__ = ["LocalFilesystemAdapter"]
