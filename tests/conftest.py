"""Shared fixtures for the safe-filename tests."""

import pytest

from safe_filename import config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user config files and environment variables out of the tests."""
    for key in config.ENV_KEYS:
        monkeypatch.delenv(f"{config.ENV_PREFIX}_{key}", raising=False)
    paths = (tmp_path / "safe-filename.toml", tmp_path / "home" / "config.toml")
    monkeypatch.setattr(config, "DEFAULT_CONFIG_PATHS", paths)
    return paths
