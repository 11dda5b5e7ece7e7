"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config file lookup at a path that does not exist."""

    config_path = tmp_path / "config" / "missing.toml"
    monkeypatch.setenv("PATHABBREV_CONFIG", str(config_path))
    return config_path
