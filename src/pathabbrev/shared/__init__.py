"""Shared helpers used by configuration and command layers."""

from pathabbrev.shared.lists import split_list

__all__ = ["split_list"]
