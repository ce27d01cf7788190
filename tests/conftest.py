"""Pytest fixtures for tvpick tests."""

import pytest


@pytest.fixture(autouse=True)
def clear_caches():
    """Clear module-level caches before each test."""
    from tvpick.config import clear_config_cache

    clear_config_cache()

    yield

    clear_config_cache()


@pytest.fixture
def config_dir(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Point the default config directory at a temp dir."""
    path = tmp_path / "tvpick"
    monkeypatch.setenv("TVPICK_CONFIG_DIR", str(path))
    return path
