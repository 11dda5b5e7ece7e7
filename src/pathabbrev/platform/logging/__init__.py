"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export configured logger, setup helpers, and custom Rich handlers.
Why: Provide a single canonical import path for every layer.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import DiagnosticRichHandler

__all__ = [
    "LOGGER_NAME",
    "DiagnosticRichHandler",
    "logger",
    "setup_logger",
]
