"""
Prefect flow for fetching the monthly temperature grid.

Samples the configured region on a regular grid from the Open-Meteo
archive (free, no API key) and caches it in the store.

Run locally:
    python -m mosquito_suitability.flows.fetch

Run with Prefect dashboard:
    prefect server start &
    python -m mosquito_suitability.flows.fetch
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

from prefect import flow, task

from mosquito_suitability.config import get_settings
from mosquito_suitability.datasources import climate
from mosquito_suitability.schemas import BoundingBox
from mosquito_suitability.store import DataStore

store = DataStore(get_settings().data_dir)

SOURCE = "open-meteo.com (archive)"

# Past-year reanalysis barely changes once published
CLIMATE_TTL = timedelta(days=30)


def climate_path(year: int) -> Path:
    """Store path of the cached grid for ``year``."""
    return Path(f"climate/tavg_{year}.json")


def _cache_matches(path: Path, bbox: BoundingBox, resolution: float) -> bool:
    """True if the cached grid is fresh and covers the same region and resolution."""
    if not store.is_fresh(path):
        return False
    meta = store.meta(path)
    return meta.get("region") == bbox.model_dump() and meta.get("resolution") == resolution


@task(name="fetch-climate-grid", retries=2, retry_delay_seconds=30)
def fetch_climate_grid(bbox: BoundingBox, resolution: float, year: int) -> dict[str, Any]:
    """Fetch monthly mean temperatures over the region and serialize them."""
    grid = climate.fetch_temperature_grid(bbox, resolution, year)
    return climate.grid_to_dict(grid)


@task(name="save-climate-grid")
def save_climate_grid(
    grid_data: dict[str, Any], bbox: BoundingBox, resolution: float, year: int
) -> Path:
    """Save the serialized grid via store."""
    return store.write(
        climate_path(year),
        grid_data,
        source=SOURCE,
        valid_until=datetime.now(UTC) + CLIMATE_TTL,
        region=bbox.model_dump(),
        resolution=resolution,
        year=year,
    )


@flow(name="fetch-climate", log_prints=True)
def fetch_all(
    bbox: BoundingBox | None = None,
    resolution: float | None = None,
    year: int | None = None,
) -> dict[str, Any]:
    """
    Fetch the temperature grid unless a fresh matching copy is cached.

    Arguments default to the values in settings.
    """
    settings = get_settings()
    bbox = bbox or settings.bbox
    resolution = resolution if resolution is not None else settings.resolution
    year = year if year is not None else settings.climate_year
    path = climate_path(year)

    if _cache_matches(path, bbox, resolution):
        print(f"Climate grid for {year} is fresh, skipping fetch.")
        grid_data = store.read(path) or {}
    else:
        lats, lons = climate.build_grid_axes(bbox, resolution)
        print(f"Fetching {year} monthly temperatures for {lats.size}x{lons.size} cells...")
        grid_data = fetch_climate_grid(bbox, resolution, year)
        output_path = save_climate_grid(grid_data, bbox, resolution, year)
        print(f"Saved climate grid to {output_path}")

    coords = grid_data.get("coords", {})
    return {
        "year": year,
        "cells": len(coords.get("lat", [])) * len(coords.get("lon", [])),
        "months": len(coords.get("month", [])),
    }


if __name__ == "__main__":
    result = fetch_all()
    print(f"Flow complete: {result}")
