"""
Tests for the fetch flow module.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

from mosquito_suitability.datasources.climate import grid_to_dict
from mosquito_suitability.flows import fetch
from mosquito_suitability.schemas import BoundingBox
from mosquito_suitability.store import DataStore

if TYPE_CHECKING:
    import pytest
    import xarray as xr

BBOX = BoundingBox(south=45.0, west=-123.0, north=47.0, east=-120.0)


class TestClimatePath:
    def test_path_per_year(self) -> None:
        assert fetch.climate_path(2023) == Path("climate/tavg_2023.json")


class TestFetchClimateGrid:
    @patch("mosquito_suitability.flows.fetch.climate.fetch_temperature_grid")
    def test_serializes_grid(self, mock_fetch: Mock, temperature_grid: xr.DataArray) -> None:
        mock_fetch.return_value = temperature_grid

        result = fetch.fetch_climate_grid(BBOX, 1.0, 2023)

        mock_fetch.assert_called_once_with(BBOX, 1.0, 2023)
        assert result["dims"] == ["month", "lat", "lon"]
        assert result["coords"]["month"] == [1, 7, 12]


class TestSaveClimateGrid:
    def test_save_with_metadata(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, temperature_grid: xr.DataArray
    ) -> None:
        monkeypatch.setattr(fetch, "store", DataStore(tmp_path))

        path = fetch.save_climate_grid(grid_to_dict(temperature_grid), BBOX, 1.0, 2023)

        assert path == tmp_path / "climate" / "tavg_2023.json"
        meta = fetch.store.meta(Path("climate/tavg_2023.json"))
        assert meta["source"] == fetch.SOURCE
        assert meta["region"] == BBOX.model_dump()
        assert meta["resolution"] == 1.0
        assert meta["year"] == 2023
        assert fetch.store.is_fresh(Path("climate/tavg_2023.json"))


class TestFetchAll:
    @patch("mosquito_suitability.flows.fetch.climate.fetch_temperature_grid")
    def test_fetches_and_saves(
        self,
        mock_fetch: Mock,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        temperature_grid: xr.DataArray,
    ) -> None:
        monkeypatch.setattr(fetch, "store", DataStore(tmp_path))
        mock_fetch.return_value = temperature_grid

        result = fetch.fetch_all(bbox=BBOX, resolution=1.0, year=2023)

        assert result == {"year": 2023, "cells": 6, "months": 3}
        assert (tmp_path / "climate" / "tavg_2023.json").exists()
        mock_fetch.assert_called_once()

    @patch("mosquito_suitability.flows.fetch.climate.fetch_temperature_grid")
    def test_skips_fresh_matching_cache(
        self,
        mock_fetch: Mock,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        temperature_grid: xr.DataArray,
    ) -> None:
        store = DataStore(tmp_path)
        monkeypatch.setattr(fetch, "store", store)
        store.write(
            Path("climate/tavg_2023.json"),
            grid_to_dict(temperature_grid),
            source="test",
            valid_until=datetime.now(UTC) + timedelta(days=1),
            region=BBOX.model_dump(),
            resolution=1.0,
        )

        result = fetch.fetch_all(bbox=BBOX, resolution=1.0, year=2023)

        mock_fetch.assert_not_called()
        assert result["cells"] == 6

    @patch("mosquito_suitability.flows.fetch.climate.fetch_temperature_grid")
    def test_refetches_when_resolution_changes(
        self,
        mock_fetch: Mock,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        temperature_grid: xr.DataArray,
    ) -> None:
        store = DataStore(tmp_path)
        monkeypatch.setattr(fetch, "store", store)
        store.write(
            Path("climate/tavg_2023.json"),
            grid_to_dict(temperature_grid),
            source="test",
            valid_until=datetime.now(UTC) + timedelta(days=1),
            region=BBOX.model_dump(),
            resolution=0.5,
        )
        mock_fetch.return_value = temperature_grid

        fetch.fetch_all(bbox=BBOX, resolution=1.0, year=2023)

        mock_fetch.assert_called_once()
