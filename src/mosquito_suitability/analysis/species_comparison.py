"""Compare species development rates over a temperature grid.

Evaluates every species' reaction norm on the same grid, stacks the results
along a ``species`` dimension, and reduces them into the tables and labels
the report shows: a tidy long frame for faceting, per-month regional
statistics, and which species develops faster where.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd
import xarray as xr

from mosquito_suitability.reaction_norm import RATE_NAME, evaluate_grid

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mosquito_suitability.schemas import Species

NO_SPECIES = "none"

SUMMARY_COLUMNS = [
    "species",
    "species_name",
    "month",
    "mean_rate",
    "max_rate",
    "suitable_fraction",
]


@dataclass
class SpeciesSummary:
    """Regional development-rate statistics for one species across the year."""

    key: str
    name: str
    peak_month: int
    peak_mean_rate: float
    annual_mean_rate: float
    months_leading: list[int] = field(default_factory=list)


def _require_month(rates: xr.DataArray) -> None:
    if "month" not in rates.dims:
        msg = "Development-rate grid has no 'month' dimension"
        raise ValueError(msg)


def evaluate_species(grid: xr.DataArray, species: Sequence[Species]) -> xr.DataArray:
    """Evaluate each species' reaction norm on ``grid``.

    Args:
        grid: Temperature DataArray, ``(lat, lon)`` or ``(month, lat, lon)``.
        species: Species to compare, in display order.

    Returns:
        Development rates with a leading ``species`` dim (coord = species key)
        and a ``species_name`` coordinate along it.

    Raises:
        ValueError: If ``species`` is empty or keys repeat.
    """
    if not species:
        msg = "At least one species is required"
        raise ValueError(msg)
    keys = [s.key for s in species]
    if len(set(keys)) != len(keys):
        msg = f"Species keys must be unique, got {keys}"
        raise ValueError(msg)

    layers = [evaluate_grid(grid, s.parameters) for s in species]
    rates = xr.concat(layers, dim=pd.Index(keys, name="species"))
    return rates.assign_coords(species_name=("species", [s.name for s in species]))


def to_long_frame(rates: xr.DataArray, temperature: xr.DataArray | None = None) -> pd.DataFrame:
    """Reshape stacked rates into one row per species and cell.

    Columns are the grid dims plus ``species_name`` and ``development_rate``;
    when ``temperature`` is given a ``temperature`` column is joined on the
    grid dims (NaN where the input cell was missing).
    """
    df = rates.to_dataframe(name=RATE_NAME).reset_index()
    if temperature is not None:
        temp_df = temperature.to_dataframe(name="temperature").reset_index()
        on = list(temperature.dims)
        df = df.merge(temp_df[[*on, "temperature"]], on=on, how="left")
    return df


def monthly_summary(rates: xr.DataArray) -> pd.DataFrame:
    """Per species and month: mean/max rate and share of cells with development.

    Raises:
        ValueError: If ``rates`` has no ``month`` dimension.
    """
    _require_month(rates)
    spatial = [d for d in rates.dims if d not in ("species", "month")]
    stats = xr.Dataset(
        {
            "mean_rate": rates.mean(spatial),
            "max_rate": rates.max(spatial),
            "suitable_fraction": (rates > 0).mean(spatial),
        }
    )
    df = stats.to_dataframe().reset_index()
    return df[SUMMARY_COLUMNS].sort_values(["species", "month"], ignore_index=True)


def favoured_species(rates: xr.DataArray) -> xr.DataArray:
    """Label each cell with the key of the species that develops fastest.

    Ties go to the species listed first; cells where every species has a
    zero rate are labelled ``"none"``.
    """
    best = rates.argmax("species")
    keys = np.asarray(rates["species"].values)
    labels = np.where(rates.max("species").values > 0, keys[best.values], NO_SPECIES)
    return xr.DataArray(labels, dims=best.dims, coords=best.coords, name="favoured_species")


def compare_species(rates: xr.DataArray) -> list[SpeciesSummary]:
    """Summarise each species over the year from the regional monthly means.

    A species "leads" a month when its regional mean rate is strictly the
    highest and above zero.

    Raises:
        ValueError: If ``rates`` has no ``month`` dimension.
    """
    summary = monthly_summary(rates)
    wide = summary.pivot(index="month", columns="species", values="mean_rate")

    leaders: dict[str, list[int]] = {}
    for month, row in wide.iterrows():
        top = row.max()
        if top <= 0 or (row == top).sum() > 1:
            continue
        leaders.setdefault(str(row.idxmax()), []).append(int(month))

    results: list[SpeciesSummary] = []
    for key, name in zip(rates["species"].values, rates["species_name"].values, strict=True):
        series = wide[str(key)]
        results.append(
            SpeciesSummary(
                key=str(key),
                name=str(name),
                peak_month=int(series.idxmax()),
                peak_mean_rate=float(series.max()),
                annual_mean_rate=float(series.mean()),
                months_leading=leaders.get(str(key), []),
            )
        )
    return results


def summaries_to_dict(summaries: list[SpeciesSummary]) -> list[dict[str, Any]]:
    """Serialize species summaries to JSON-compatible dicts."""
    return [
        {
            "key": s.key,
            "name": s.name,
            "peak_month": s.peak_month,
            "peak_mean_rate": round(s.peak_mean_rate, 4),
            "annual_mean_rate": round(s.annual_mean_rate, 4),
            "months_leading": s.months_leading,
        }
        for s in summaries
    ]
