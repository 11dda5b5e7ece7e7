"""Rich console handler for diagnostic output."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class DiagnosticRichHandler(RichHandler):
    """Rich handler that renders structured abbreviation events compactly."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "abbreviation.root.matched": ("🏠", "cyan"),
        "abbreviation.project.detected": ("📁", "blue"),
        "config.root.skipped": ("ℹ️", "yellow"),
        "config.color.ignored": ("⚠️", "yellow"),
        "config.file.invalid": ("❌", "red"),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _render_event_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render records tagged with ``abbreviation_event`` using their icon and color."""

        event = getattr(record, "abbreviation_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(message, style=Style(color=color))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for abbreviation events."""

        event_text = self._render_event_message(record, message)
        if event_text is not None:
            return event_text

        return super().render_message(record, message)


__all__ = ["DiagnosticRichHandler"]
