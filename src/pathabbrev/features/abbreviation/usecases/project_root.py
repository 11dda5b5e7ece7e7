"""Summary: Decide whether a directory is a project root by probing marker entries.
Why: Repository directories stay readable in the abbreviated output.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import final

from pathabbrev.platform.logging import logger

from .ports import ExistenceProbe


@final
class ProjectRootDetector:
    """Report whether a directory contains any configured marker.

    Every call probes the filesystem again; results are not cached across
    segments or paths.
    """

    def __init__(
        self,
        markers: Iterable[str],
        probe: ExistenceProbe,
        separator: str = os.sep,
    ) -> None:
        self.markers: tuple[str, ...] = tuple(markers)
        self.probe = probe
        self.separator = separator

    def marker_path(self, directory: str, marker: str) -> str:
        """Join ``directory`` and ``marker``.

        The empty leading segment of an absolute path stands for the
        filesystem root, so ``""`` joins to ``"/marker"``.
        """
        if directory.endswith(self.separator):
            return f"{directory}{marker}"
        return f"{directory}{self.separator}{marker}"

    def is_project_root(self, directory: str) -> bool:
        """Return True on the first marker found under ``directory``."""

        for marker in self.markers:
            if self.probe.exists(self.marker_path(directory, marker)):
                logger.debug(
                    "Project root %s (found %s)",
                    directory or self.separator,
                    marker,
                    extra={"abbreviation_event": "abbreviation.project.detected"},
                )
                return True
        return False


__all__ = ["ProjectRootDetector"]
