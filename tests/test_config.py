"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from polypaper.config import Settings, get_settings
from polypaper.core.mesh import MeshConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop any POLYPAPER_ variables from the real environment."""
    import os
    for key in list(os.environ):
        if key.startswith("POLYPAPER_"):
            monkeypatch.delenv(key)


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self):
        settings = Settings()
        assert settings.width == 1920
        assert settings.height == 1080
        assert settings.light_count == 2
        assert settings.z_offset == 100
        assert settings.fullscreen is True
        assert settings.log_format == "plain"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("POLYPAPER_WIDTH", "1280")
        monkeypatch.setenv("POLYPAPER_LIGHT_COUNT", "4")
        settings = Settings()
        assert settings.width == 1280
        assert settings.light_count == 4

    def test_rejects_invalid_values(self):
        with pytest.raises(ValidationError):
            Settings(light_count=0)
        with pytest.raises(ValidationError):
            Settings(height=-1)
        with pytest.raises(ValidationError):
            Settings(log_format="xml")

    def test_mesh_config(self):
        config = Settings(light_count=3, z_offset=250, legacy_centroid=True).mesh_config()
        assert isinstance(config, MeshConfig)
        assert config.light_count == 3
        assert config.z_offset == 250
        assert config.legacy_centroid is True


class TestEnvFile:
    """Test .env loading."""

    def test_env_file_values(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("POLYPAPER_HEIGHT=720\nPOLYPAPER_SEED=from_file\n")
        monkeypatch.setenv("POLYPAPER_SEED", "from_env")
        # Restored after the test even though load_env_file sets it directly
        monkeypatch.setenv("POLYPAPER_HEIGHT", "0")
        monkeypatch.delenv("POLYPAPER_HEIGHT")

        settings = get_settings(env_file)
        assert settings.height == 720
        # The process environment wins over the file
        assert settings.seed == "from_env"

    def test_missing_env_file(self, tmp_path):
        settings = get_settings(tmp_path / "missing.env")
        assert settings.width == 1920
