"""pathabbrev - abbreviate filesystem paths for shell prompts."""

__version__ = "0.1.0"
