"""Summary: Split delimited option strings into trimmed, non-empty items.
Why: Command-line values and config entries share the same list syntax.
"""

from __future__ import annotations

from collections.abc import Iterable


def split_list(value: str | Iterable[str] | None, separator: str = ",") -> tuple[str, ...]:
    """Split ``value`` on ``separator`` dropping blank items.

    Args:
        value: Delimited string, an iterable of strings, or None.
        separator: Delimiter used when ``value`` is a string.

    Returns:
        tuple[str, ...]: Trimmed items in their original order.
    """
    if value is None:
        return ()
    parts = value.split(separator) if isinstance(value, str) else list(value)
    return tuple(part.strip() for part in parts if part.strip())


__all__ = ["split_list"]
