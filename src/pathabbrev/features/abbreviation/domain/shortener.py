"""Segment shortening rule."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, final


@final
@dataclass(frozen=True, slots=True)
class ShortenedSegment:
    """Visible text of a segment and whether characters were dropped."""

    text: str
    truncated: bool = False

    @property
    def lead(self) -> str:
        """Part of the text shown with the normal decoration."""
        return self.text[:1] if self.truncated else self.text

    @property
    def elided_indicator(self) -> str:
        """Characters that signal elision; empty when nothing was dropped."""
        return self.text[1:] if self.truncated else ""


@final
class SegmentShortener:
    """Collapse a path segment to its leading characters.

    Lengths count code points, so ``"ドキュメント"`` becomes ``"ドキュ"``.
    """

    MAX_UNSHORTENED: ClassVar[int] = 3
    INDICATOR_LENGTH: ClassVar[int] = 2

    @classmethod
    def shorten(cls, segment: str, enabled: bool = True) -> ShortenedSegment:
        """Shorten ``segment`` when enabled and longer than three characters.

        Args:
            segment: Text between two separators.
            enabled: Whether abbreviation is switched on.

        Returns:
            ShortenedSegment: The first character plus the next two, flagged
            as truncated, or the segment unchanged.
        """
        if not enabled or len(segment) <= cls.MAX_UNSHORTENED:
            return ShortenedSegment(segment)

        return ShortenedSegment(segment[: 1 + cls.INDICATOR_LENGTH], truncated=True)


__all__ = ["SegmentShortener", "ShortenedSegment"]
