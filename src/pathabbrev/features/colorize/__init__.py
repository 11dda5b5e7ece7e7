# Path: `src/pathabbrev/features/colorize/__init__.py`
# Summary: Export colorizer domain types and the rich-backed style resolver.
# Why: Provide a stable import surface for the command layer and tests.

from .adapters.rich_styles import RichStyleResolver
from .domain.colorizer import (
    CONFIGURABLE_ROLES,
    Colorizer,
    DecorationRole,
    Decorator,
    StyleResolver,
    StyleSpecError,
    identity,
)
from .domain.escape import EscapeMode

__all__ = [
    "CONFIGURABLE_ROLES",
    "Colorizer",
    "DecorationRole",
    "Decorator",
    "EscapeMode",
    "RichStyleResolver",
    "StyleResolver",
    "StyleSpecError",
    "identity",
]
