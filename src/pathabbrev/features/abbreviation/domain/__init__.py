"""Abbreviation domain objects."""
