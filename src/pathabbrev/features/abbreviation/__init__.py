# Path: `src/pathabbrev/features/abbreviation/__init__.py`
# Summary: Export abbreviation domain and use case symbols.
# Why: Provide a stable import surface for the command layer and tests.

from .adapters.filesystem_adapter import LocalFilesystemAdapter
from .domain.models import PathAbbreviationPolicy, SegmentRole
from .domain.roots import HOME_LABEL, RootEntry, RootMatch, RootRegistry
from .domain.shortener import SegmentShortener, ShortenedSegment
from .usecases.abbreviator import PathAbbreviator
from .usecases.ports import ExistenceProbe
from .usecases.project_root import ProjectRootDetector

__all__ = [
    "HOME_LABEL",
    "ExistenceProbe",
    "LocalFilesystemAdapter",
    "PathAbbreviationPolicy",
    "PathAbbreviator",
    "ProjectRootDetector",
    "RootEntry",
    "RootMatch",
    "RootRegistry",
    "SegmentRole",
    "SegmentShortener",
    "ShortenedSegment",
]
