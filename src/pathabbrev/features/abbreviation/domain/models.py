"""Data structures that describe how paths are abbreviated."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum

from pathabbrev.features.colorize import Colorizer, DecorationRole

from .roots import RootRegistry


class SegmentRole(Enum):
    """Classification of one output piece, selecting decoration and shortening."""

    ENV_ROOT_LABEL = "env_root_label"
    PROJECT_ROOT = "project_root"
    ORDINARY = "ordinary"
    TERMINAL = "terminal"

    @property
    def decoration(self) -> DecorationRole:
        return _DECORATION_BY_ROLE[self]

    @property
    def shortenable(self) -> bool:
        return self is SegmentRole.ORDINARY


_DECORATION_BY_ROLE: dict[SegmentRole, DecorationRole] = {
    SegmentRole.ENV_ROOT_LABEL: DecorationRole.ROOT,
    SegmentRole.PROJECT_ROOT: DecorationRole.PROJECT,
    SegmentRole.ORDINARY: DecorationRole.DEFAULT,
    SegmentRole.TERMINAL: DecorationRole.NONE,
}


@dataclass(slots=True, frozen=True)
class PathAbbreviationPolicy:
    """Settings shared by every path abbreviated during one run."""

    roots: RootRegistry = field(default_factory=RootRegistry)
    project_markers: tuple[str, ...] = ()
    abbreviate: bool = True
    colorizer: Colorizer = field(default_factory=Colorizer)
    separator: str = os.sep


__all__ = ["PathAbbreviationPolicy", "SegmentRole"]
