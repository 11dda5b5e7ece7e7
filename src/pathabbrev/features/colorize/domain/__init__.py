"""Colorize domain objects."""
