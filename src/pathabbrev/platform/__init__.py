"""Platform helpers (logging, filesystem)."""
