"""Colorize adapters."""
