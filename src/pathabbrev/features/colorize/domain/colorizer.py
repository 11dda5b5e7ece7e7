"""Per-role text decoration for abbreviated paths.

Where: features/colorize/domain.
What: A fixed record of one decoration function per semantic role, built from
a ``role=attribute`` color specification.
Why: The role set is closed, so a record of callables replaces a lookup table
and unknown roles can be dropped while parsing.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Final, Protocol, final, runtime_checkable

from pathabbrev.platform.logging import logger
from pathabbrev.shared import split_list

from .escape import EscapeMode

Decorator = Callable[[str], str]


class StyleSpecError(ValueError):
    """Raised when an attribute specification cannot be turned into a style."""


class DecorationRole(str, Enum):
    """Semantic part of the output that receives its own decoration."""

    ROOT = "root"
    PROJECT = "project"
    SEPARATOR = "separator"
    ELLIPSIS = "ellipsis"
    DEFAULT = "default"
    NONE = "none"


# Roles that may be set from a color specification; NONE always stays plain.
CONFIGURABLE_ROLES: Final[frozenset[DecorationRole]] = frozenset(
    {
        DecorationRole.ROOT,
        DecorationRole.PROJECT,
        DecorationRole.SEPARATOR,
        DecorationRole.ELLIPSIS,
        DecorationRole.DEFAULT,
    }
)


@runtime_checkable
class StyleResolver(Protocol):
    """Turns an opaque attribute token into a start/reset control sequence pair."""

    def resolve(self, attribute: str) -> tuple[str, str]:
        """Return ``(start, reset)``; raise ``StyleSpecError`` when invalid."""
        ...


def identity(text: str) -> str:
    return text


def _make_decorator(start: str, reset: str, escape: EscapeMode) -> Decorator:
    opening = escape.wrap(start)
    closing = escape.wrap(reset)

    def decorate(text: str) -> str:
        return f"{opening}{text}{closing}"

    return decorate


@final
@dataclass(frozen=True, slots=True)
class Colorizer:
    """Decoration functions for each role; unset roles pass text through."""

    env_root: Decorator = identity
    project: Decorator = identity
    separator: Decorator = identity
    ellipsis: Decorator = identity
    default: Decorator = identity
    none: Decorator = identity

    def decorate(self, role: DecorationRole, text: str) -> str:
        """Apply the decoration configured for ``role`` to ``text``."""

        match role:
            case DecorationRole.ROOT:
                return self.env_root(text)
            case DecorationRole.PROJECT:
                return self.project(text)
            case DecorationRole.SEPARATOR:
                return self.separator(text)
            case DecorationRole.ELLIPSIS:
                return self.ellipsis(text)
            case DecorationRole.DEFAULT:
                return self.default(text)
            case DecorationRole.NONE:
                return self.none(text)

    @classmethod
    def from_spec(
        cls,
        spec: str | None,
        resolver: StyleResolver,
        escape: EscapeMode = EscapeMode.NONE,
    ) -> Colorizer:
        """Build a colorizer from comma separated ``role=attribute`` pairs.

        Entries with the wrong number of fields, unknown roles, or attributes
        the resolver rejects are skipped; the affected role stays undecorated.
        When a role appears more than once the last valid entry wins.

        Args:
            spec: Color specification, e.g. ``"project=blue+b,root=245"``.
            resolver: Collaborator that maps an attribute to control sequences.
            escape: Prompt escape applied around each control sequence.

        Returns:
            Colorizer: Immutable decoration record.
        """
        decorators: dict[str, Decorator] = {}

        for entry in split_list(spec):
            parts = split_list(entry, "=")
            if len(parts) != 2:
                logger.debug(
                    "Ignoring malformed color entry %r",
                    entry,
                    extra={"abbreviation_event": "config.color.ignored"},
                )
                continue

            identifier, attribute = parts
            try:
                role = DecorationRole(identifier)
            except ValueError:
                role = None
            if role is None or role not in CONFIGURABLE_ROLES:
                logger.debug(
                    "Ignoring color entry for unknown role %r",
                    identifier,
                    extra={"abbreviation_event": "config.color.ignored"},
                )
                continue

            try:
                start, reset = resolver.resolve(attribute)
            except StyleSpecError as e:
                logger.debug(
                    "Ignoring color entry %r: %s",
                    entry,
                    e,
                    extra={"abbreviation_event": "config.color.ignored"},
                )
                continue

            decorators[_FIELD_BY_ROLE[role]] = _make_decorator(start, reset, escape)

        return cls(**decorators)


_FIELD_BY_ROLE: Final[dict[DecorationRole, str]] = {
    DecorationRole.ROOT: "env_root",
    DecorationRole.PROJECT: "project",
    DecorationRole.SEPARATOR: "separator",
    DecorationRole.ELLIPSIS: "ellipsis",
    DecorationRole.DEFAULT: "default",
}


__all__ = [
    "CONFIGURABLE_ROLES",
    "Colorizer",
    "DecorationRole",
    "Decorator",
    "StyleResolver",
    "StyleSpecError",
    "identity",
]
