"""Shared pytest fixtures for minicalc tests."""

from pathlib import Path

import pytest

from minicalc.core.config import CalcConfig


@pytest.fixture
def default_config() -> CalcConfig:
    """Return the configuration used when no minicalc.toml exists."""
    return CalcConfig()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Return a path for a minicalc.toml inside a temporary directory."""
    return tmp_path / "minicalc.toml"
