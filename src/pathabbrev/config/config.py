"""Configuration management for pathabbrev."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Final

from pathabbrev.config.paths import default_config_path
from pathabbrev.platform.logging import logger
from pathabbrev.shared import split_list


DEFAULT_PROJECT_FILES: Final[tuple[str, ...]] = (
    ".git",
    ".hg",
    ".svn",
    "pom.xml",
    "package.json",
    ".editorconfig",
)
DEFAULT_ENV_ROOTS: Final[tuple[str, ...]] = ("GOPATH",)
DEFAULT_COLOR_SPEC: Final[str] = (
    "project=blue+b,root=245,separator=245,ellipsis=247,default=[none]"
)
DEFAULT_PROMPT_ESCAPE: Final[str] = "none"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


def _list_field() -> Any:
    return field(default=None, metadata={"list": True})


@dataclass(frozen=True)
class Config:
    """Values read from the configuration file.

    ``None`` means the file does not set the option, so command line values
    and built-in defaults decide.
    """

    # Marker entries identifying a project root
    project_files: tuple[str, ...] | None = _list_field()

    # Environment variables whose values are abbreviated as $NAME
    env_roots: tuple[str, ...] | None = _list_field()

    # Directories abbreviated as "~"
    home: tuple[str, ...] | None = _list_field()

    # role=attribute pairs
    color: str | None = None

    # none, zsh or bash
    prompt_escape: str | None = None

    abbreviate: bool | None = None

    log_file: Path | None = _path_field()

    @classmethod
    def load(cls, config_file: Path | None = None) -> Config:
        """Load configuration from file.

        A missing file yields an empty configuration. Unreadable or malformed
        files are reported and ignored so prompt rendering never fails.

        Args:
            config_file: Explicit location; defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.
        """
        target = config_file if config_file is not None else default_config_path()

        try:
            if not target.is_file():
                logger.debug("No configuration file at %s", target)
                return cls()
            with open(target, "rb") as f:
                raw = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(
                "Ignoring configuration file %s: %s",
                target,
                e,
                extra={"abbreviation_event": "config.file.invalid"},
            )
            return cls()

        logger.debug("Configuration loaded from %s", target)
        return cls.from_mapping(raw)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> Config:
        """Build a configuration from parsed TOML, skipping invalid entries."""

        known = {f.name: f for f in fields(cls)}
        values: dict[str, Any] = {}

        for key, value in raw.items():
            f = known.get(key)
            if f is None:
                logger.warning("Unknown configuration key ignored: %s", key)
                continue
            try:
                values[key] = cls._coerce(key, value, f.metadata)
            except TypeError as e:
                logger.warning(
                    "Invalid configuration value for %s ignored: %s",
                    key,
                    e,
                    extra={"abbreviation_event": "config.file.invalid"},
                )

        return cls(**values)

    @staticmethod
    def _coerce(key: str, value: Any, metadata: Mapping[str, Any]) -> Any:
        if metadata.get("list"):
            if isinstance(value, str):
                return split_list(value)
            if isinstance(value, list) and all(isinstance(v, str) for v in value):
                return split_list(value)
            raise TypeError(f"{key} must be a string or an array of strings")

        if metadata.get("path"):
            if not isinstance(value, str):
                raise TypeError(f"{key} must be a string")
            return Path(value).expanduser() if value.strip() else None

        if key == "abbreviate":
            if not isinstance(value, bool):
                raise TypeError("abbreviate must be a boolean")
            return value

        if key == "color":
            if isinstance(value, str):
                return value
            if isinstance(value, dict):
                # [color] table: role = "attribute"
                return ",".join(f"{role}={attr}" for role, attr in value.items())
            raise TypeError("color must be a string or a table")

        if not isinstance(value, str):
            raise TypeError(f"{key} must be a string")
        return value


__all__ = [
    "DEFAULT_COLOR_SPEC",
    "DEFAULT_ENV_ROOTS",
    "DEFAULT_PROJECT_FILES",
    "DEFAULT_PROMPT_ESCAPE",
    "Config",
]
