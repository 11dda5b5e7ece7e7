"""Ports for abbreviation use cases.

Where: features/abbreviation/usecases.
What: Protocol describing the filesystem access project-root detection needs.
Why: Detection logic can be exercised against an in-memory probe in tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ExistenceProbe(Protocol):
    """Existence-only filesystem access."""

    def exists(self, path: str) -> bool:
        """Return True when ``path`` names an existing file or directory."""
        ...
