"""Tests for the species comparison analysis."""

from __future__ import annotations

import math

import numpy as np
import pytest
import xarray as xr

from mosquito_suitability.analysis import (
    NO_SPECIES,
    compare_species,
    evaluate_species,
    favoured_species,
    monthly_summary,
    summaries_to_dict,
    to_long_frame,
)
from mosquito_suitability.reaction_norm import evaluate
from mosquito_suitability.reference import DEFAULT_SPECIES, SPECIES_A, SPECIES_B

RATE_A_WARM = evaluate(25.0, SPECIES_A.parameters)
RATE_B_WARM = evaluate(25.0, SPECIES_B.parameters)
RATE_B_COLD = evaluate(5.0, SPECIES_B.parameters)


@pytest.fixture
def rates(temperature_grid: xr.DataArray) -> xr.DataArray:
    return evaluate_species(temperature_grid, DEFAULT_SPECIES)


class TestEvaluateSpecies:
    def test_stacks_species(self, rates: xr.DataArray) -> None:
        assert rates.dims == ("species", "month", "lat", "lon")
        assert list(rates["species"].values) == ["species_a", "species_b"]
        assert list(rates["species_name"].values) == ["Species A", "Species B"]

    def test_values_per_species(self, rates: xr.DataArray) -> None:
        warm = rates.sel(month=7, lat=46.5, lon=-120.5)
        assert float(warm.sel(species="species_a")) == pytest.approx(RATE_A_WARM)
        assert float(warm.sel(species="species_b")) == pytest.approx(RATE_B_WARM)
        assert float(rates.sel(species="species_a", month=1).max()) == 0.0
        assert float(rates.sel(species="species_b", month=1).min()) == pytest.approx(RATE_B_COLD)

    def test_no_nan_in_output(self, rates: xr.DataArray) -> None:
        assert not bool(rates.isnull().any())

    def test_requires_species(self, temperature_grid: xr.DataArray) -> None:
        with pytest.raises(ValueError, match="At least one"):
            evaluate_species(temperature_grid, [])

    def test_rejects_duplicate_keys(self, temperature_grid: xr.DataArray) -> None:
        with pytest.raises(ValueError, match="unique"):
            evaluate_species(temperature_grid, [SPECIES_A, SPECIES_A])


class TestToLongFrame:
    def test_one_row_per_species_and_cell(self, rates: xr.DataArray) -> None:
        df = to_long_frame(rates)
        assert len(df) == 2 * 3 * 2 * 3
        assert {"species", "species_name", "month", "lat", "lon", "development_rate"} <= set(
            df.columns
        )

    def test_joins_temperature(
        self, rates: xr.DataArray, temperature_grid: xr.DataArray
    ) -> None:
        df = to_long_frame(rates, temperature_grid)
        assert len(df) == 36
        missing = df[(df["month"] == 7) & (df["lat"] == 45.5) & (df["lon"] == -122.5)]
        assert len(missing) == 2
        assert missing["temperature"].isna().all()
        assert (missing["development_rate"] == 0).all()


class TestMonthlySummary:
    def test_columns_and_rows(self, rates: xr.DataArray) -> None:
        summary = monthly_summary(rates)
        assert list(summary.columns) == [
            "species",
            "species_name",
            "month",
            "mean_rate",
            "max_rate",
            "suitable_fraction",
        ]
        assert len(summary) == 6

    def test_values(self, rates: xr.DataArray) -> None:
        summary = monthly_summary(rates).set_index(["species", "month"])
        a_july = summary.loc[("species_a", 7)]
        assert a_july["mean_rate"] == pytest.approx(RATE_A_WARM * 5 / 6)
        assert a_july["max_rate"] == pytest.approx(RATE_A_WARM)
        assert a_july["suitable_fraction"] == pytest.approx(5 / 6)
        assert summary.loc[("species_b", 1), "suitable_fraction"] == pytest.approx(1.0)
        assert summary.loc[("species_a", 12), "mean_rate"] == 0.0

    def test_requires_month(self, rates: xr.DataArray) -> None:
        with pytest.raises(ValueError, match="month"):
            monthly_summary(rates.isel(month=0, drop=True))


class TestFavouredSpecies:
    def test_labels(self, rates: xr.DataArray) -> None:
        labels = favoured_species(rates)
        assert labels.dims == ("month", "lat", "lon")
        assert (labels.sel(month=1).values == "species_b").all()
        assert (labels.sel(month=12).values == NO_SPECIES).all()
        july = labels.sel(month=7)
        assert july.sel(lat=45.5, lon=-122.5).item() == NO_SPECIES
        assert july.sel(lat=46.5, lon=-120.5).item() == "species_a"

    def test_tie_goes_to_first_species(self) -> None:
        rates = xr.DataArray(
            np.full((2, 1, 1), 0.5),
            dims=("species", "lat", "lon"),
            coords={"species": ["x", "y"], "lat": [0.0], "lon": [0.0]},
        )
        assert favoured_species(rates).item() == "x"


class TestCompareSpecies:
    def test_summaries(self, rates: xr.DataArray) -> None:
        summaries = {s.key: s for s in compare_species(rates)}
        a = summaries["species_a"]
        b = summaries["species_b"]

        assert a.name == "Species A"
        assert a.peak_month == 7
        assert a.months_leading == [7]
        assert a.annual_mean_rate == pytest.approx(RATE_A_WARM * 5 / 6 / 3)

        assert b.peak_month == 7
        assert b.months_leading == [1]
        assert b.peak_mean_rate == pytest.approx(RATE_B_WARM * 5 / 6)

    def test_keeps_species_order(self, rates: xr.DataArray) -> None:
        assert [s.key for s in compare_species(rates)] == ["species_a", "species_b"]

    def test_to_dict(self, rates: xr.DataArray) -> None:
        data = summaries_to_dict(compare_species(rates))
        assert data[0]["key"] == "species_a"
        assert data[0]["months_leading"] == [7]
        assert not math.isnan(data[1]["annual_mean_rate"])
