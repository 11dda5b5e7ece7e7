"""Shared path utilities for configuration locations.

Policy:
- Config: ``$PATHABBREV_CONFIG`` when set, otherwise
  ``$XDG_CONFIG_HOME/pathabbrev/config.toml`` falling back to
  ``~/.config/pathabbrev/config.toml``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_CONFIG_FILE: Final[str] = "PATHABBREV_CONFIG"
_ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"
_APP_DIR_NAME: Final[str] = "pathabbrev"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser()

    return default_factory().expanduser()


def default_config_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the XDG configuration directory for the application."""

    mapping = env if env is not None else os.environ
    xdg_home = (mapping.get(_ENV_XDG_CONFIG_HOME) or "").strip()
    base = Path(xdg_home) if xdg_home else Path("~") / ".config"
    return (base / _APP_DIR_NAME).expanduser()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file.

    Args:
        env: Environment mapping used for overrides. Defaults to ``os.environ``.

    Returns:
        Path: Location of ``config.toml``; the file may not exist.
    """
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: default_config_dir(env) / "config.toml",
    )


__all__ = [
    "default_config_dir",
    "default_config_path",
    "resolve_overridable_path",
]
