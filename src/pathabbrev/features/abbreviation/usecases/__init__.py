"""Abbreviation use cases."""

from .abbreviator import PathAbbreviator
from .ports import ExistenceProbe
from .project_root import ProjectRootDetector

__all__ = ["ExistenceProbe", "PathAbbreviator", "ProjectRootDetector"]
