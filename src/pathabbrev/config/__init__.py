"""Configuration package exports."""

from pathabbrev.config.config import (
    DEFAULT_COLOR_SPEC,
    DEFAULT_ENV_ROOTS,
    DEFAULT_PROJECT_FILES,
    DEFAULT_PROMPT_ESCAPE,
    Config,
)
from pathabbrev.config.paths import default_config_path, resolve_overridable_path

__all__ = [
    "DEFAULT_COLOR_SPEC",
    "DEFAULT_ENV_ROOTS",
    "DEFAULT_PROJECT_FILES",
    "DEFAULT_PROMPT_ESCAPE",
    "Config",
    "default_config_path",
    "resolve_overridable_path",
]
