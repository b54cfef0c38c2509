"""
Application settings.

Values come from environment variables prefixed with ``MOSQUITO_`` (or a
local ``.env`` file), e.g. ``MOSQUITO_CLIMATE_YEAR=2023``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from mosquito_suitability.schemas import BoundingBox


class Settings(BaseSettings):
    """Runtime configuration for the pipeline and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="MOSQUITO_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "mosquito-suitability"
    app_env: str = "development"
    debug: bool = False
    api_port: int = 8000

    data_dir: Path = Path("data")

    # Study region (defaults to Oregon/Washington)
    south: float = 41.99
    west: float = -124.57
    north: float = 49.0
    east: float = -116.46
    resolution: float = 1.0

    climate_year: int = 2023
    species_file: Path | None = None

    # Local gridded file to use instead of fetching (netCDF or similar)
    grid_file: Path | None = None
    grid_variable: str | None = None

    @property
    def bbox(self) -> BoundingBox:
        """Study region as a validated bounding box."""
        return BoundingBox(south=self.south, west=self.west, north=self.north, east=self.east)


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
