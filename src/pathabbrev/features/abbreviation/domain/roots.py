"""Summary: Ordered registry of labelled roots used to replace a path prefix.
Why: Named environment roots must win over home, and the first home configured wins.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import ClassVar, Final, final

from pathabbrev.platform.logging import logger

HOME_LABEL: Final[str] = "~"
ENV_LABEL_PREFIX: Final[str] = "$"


def strip_trailing_separator(path: str, separator: str = os.sep) -> str:
    """Drop one trailing separator unless the path is the filesystem root."""

    if len(path) <= 1:
        return path
    return path.removesuffix(separator)


@final
@dataclass(frozen=True, slots=True)
class RootEntry:
    """A label substituted for ``absolute_path`` and everything it prefixes."""

    label: str
    absolute_path: str
    separator: str = os.sep

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "absolute_path",
            strip_trailing_separator(self.absolute_path, self.separator),
        )

    def matches(self, path: str) -> bool:
        return path == self.absolute_path or path.startswith(
            self.absolute_path + self.separator
        )

    @property
    def segment_count(self) -> int:
        """Number of path segments the label stands for."""
        return self.absolute_path.count(self.separator) + 1


@final
@dataclass(frozen=True, slots=True)
class RootMatch:
    """Result of a registry lookup; an empty label means nothing matched."""

    label: str
    consumed_segments: int

    NO_MATCH: ClassVar[RootMatch]

    def __bool__(self) -> bool:
        return bool(self.label)


RootMatch.NO_MATCH = RootMatch(label="", consumed_segments=0)


@final
@dataclass(frozen=True, slots=True)
class RootRegistry:
    """Ordered roots; the first entry matching a path wins."""

    entries: tuple[RootEntry, ...] = ()

    def match(self, path: str) -> RootMatch:
        """Find the first configured root equal to, or a directory prefix of, ``path``.

        Args:
            path: Absolute path being abbreviated.

        Returns:
            RootMatch: Label and number of leading segments it replaces, or
            ``RootMatch.NO_MATCH``.
        """
        for entry in self.entries:
            if entry.matches(path):
                return RootMatch(label=entry.label, consumed_segments=entry.segment_count)
        return RootMatch.NO_MATCH

    @classmethod
    def from_environment(
        cls,
        env_names: Iterable[str],
        home_dirs: Iterable[str],
        environ: Mapping[str, str] | None = None,
        separator: str = os.sep,
    ) -> RootRegistry:
        """Build the registry: named environment roots first, then home directories.

        Variables that are unset or empty are skipped.

        Args:
            env_names: Environment variable names, in priority order.
            home_dirs: Directories abbreviated as ``~``, in priority order.
            environ: Environment mapping; defaults to ``os.environ``.
            separator: Path separator for the entries.

        Returns:
            RootRegistry: Registry with entries in lookup order.
        """
        mapping = environ if environ is not None else os.environ
        entries: list[RootEntry] = []

        for raw_name in env_names:
            name = raw_name.strip()
            if not name:
                continue
            value = mapping.get(name, "")
            if not value:
                logger.debug(
                    "Environment root $%s is not set; skipping",
                    name,
                    extra={"abbreviation_event": "config.root.skipped"},
                )
                continue
            entries.append(RootEntry(f"{ENV_LABEL_PREFIX}{name}", value, separator))

        for home in home_dirs:
            if home:
                entries.append(RootEntry(HOME_LABEL, home, separator))

        return cls(entries=tuple(entries))


__all__ = [
    "ENV_LABEL_PREFIX",
    "HOME_LABEL",
    "RootEntry",
    "RootMatch",
    "RootRegistry",
    "strip_trailing_separator",
]
