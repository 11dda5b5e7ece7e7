"""Summary: Compose the abbreviated, optionally colorized form of a path.
Why: Root substitution, project detection and shortening meet in one place.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import final

from pathabbrev.features.abbreviation.domain.models import PathAbbreviationPolicy, SegmentRole
from pathabbrev.features.abbreviation.domain.shortener import SegmentShortener
from pathabbrev.features.colorize import DecorationRole
from pathabbrev.platform.logging import logger

from .ports import ExistenceProbe
from .project_root import ProjectRootDetector


@final
class PathAbbreviator:
    """Abbreviate paths according to a fixed policy.

    Each call depends only on the path, the policy, and the filesystem
    state at the time of the call.
    """

    def __init__(self, policy: PathAbbreviationPolicy, probe: ExistenceProbe) -> None:
        """Initialize the abbreviator.

        Args:
            policy: Roots, markers, abbreviation switch and colorizer for the run.
            probe: Filesystem existence check used for marker lookups.
        """
        self.policy = policy
        self.detector = ProjectRootDetector(
            policy.project_markers,
            probe,
            separator=policy.separator,
        )

    def shorten(self, path: str) -> str:
        """Return the abbreviated form of ``path``.

        Args:
            path: Separator-delimited path; need not exist.

        Returns:
            str: Root label, shortened directories and the full final segment
            joined by the decorated separator. Empty input gives ``""``.
        """
        if not path:
            return ""

        separator = self.policy.separator
        colorizer = self.policy.colorizer

        root = self.policy.roots.match(path)
        pieces: list[str] = []
        if root:
            logger.debug(
                "%s abbreviated as %s",
                path,
                root.label,
                extra={"abbreviation_event": "abbreviation.root.matched"},
            )
            pieces.append(self._decorate(SegmentRole.ENV_ROOT_LABEL, root.label))

        segments = path.split(separator)
        last = len(segments) - 1

        for index in range(root.consumed_segments, last):
            directory = separator.join(segments[: index + 1])
            pieces.append(self._render_directory(segments[index], directory))

        if last >= root.consumed_segments:
            role = (
                SegmentRole.PROJECT_ROOT
                if self.detector.is_project_root(path)
                else SegmentRole.TERMINAL
            )
            pieces.append(self._decorate(role, segments[last]))

        return colorizer.decorate(DecorationRole.SEPARATOR, separator).join(pieces)

    def shorten_all(self, paths: Iterable[str]) -> Iterator[str]:
        """Abbreviate each path in order."""

        for path in paths:
            yield self.shorten(path)

    def _render_directory(self, segment: str, directory: str) -> str:
        if self.detector.is_project_root(directory):
            return self._decorate(SegmentRole.PROJECT_ROOT, segment)

        shortened = SegmentShortener.shorten(segment, self.policy.abbreviate)
        if not shortened.truncated:
            return self._decorate(SegmentRole.ORDINARY, shortened.text)

        colorizer = self.policy.colorizer
        return self._decorate(SegmentRole.ORDINARY, shortened.lead) + colorizer.decorate(
            DecorationRole.ELLIPSIS, shortened.elided_indicator
        )

    def _decorate(self, role: SegmentRole, text: str) -> str:
        return self.policy.colorizer.decorate(role.decoration, text)


__all__ = ["PathAbbreviator"]
