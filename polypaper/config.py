"""Configuration management."""

import os
from pathlib import Path
from typing import Literal, Optional

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.mesh import MeshConfig

ENV_PREFIX = "POLYPAPER_"


def load_env_file(path: Path) -> None:
    """Copy values from a .env file into the environment without overriding it."""
    if not path.exists():
        return
    for key, value in dotenv_values(path).items():
        if key not in os.environ and value is not None:
            os.environ[key] = value


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")

    # Viewport
    width: float = Field(default=1920.0, gt=0, description="Viewport width")
    height: float = Field(default=1080.0, gt=0, description="Viewport height")
    fullscreen: bool = Field(default=True, description="Open the viewer full-screen")

    # Generation
    light_count: int = Field(default=2, ge=1, description="Number of point lights")
    z_offset: float = Field(default=100.0, gt=0, description="Base light height above the plane")
    seed: Optional[str] = Field(default=None, description="Seed for the first mesh")
    legacy_centroid: bool = Field(default=False, description="Use the skewed y centroid")

    # Screenshots
    output_dir: str = Field(default=".", description="Directory for saved frames")
    screenshot_prefix: str = Field(default="output", description="Saved frame file name prefix")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["plain", "json"] = Field(default="plain", description="Logging format")

    def mesh_config(self) -> MeshConfig:
        """Build the per-generation config from these settings."""
        return MeshConfig(
            light_count=self.light_count,
            z_offset=self.z_offset,
            legacy_centroid=self.legacy_centroid,
        )


def get_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings, reading ``env_file`` (default ``./.env``) first."""
    load_env_file(env_file if env_file is not None else Path.cwd() / ".env")
    return Settings()
