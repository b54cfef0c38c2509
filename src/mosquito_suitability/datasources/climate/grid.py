"""Monthly mean temperature grids built from the Open-Meteo archive API.

The region is sampled at cell centres on a regular lat/lon grid. Each
latitude row is fetched in one request (Open-Meteo accepts comma-separated
coordinate lists), daily means are averaged per calendar month, and the
result is stacked into a ``(month, lat, lon)`` DataArray.
"""

from __future__ import annotations

import math
import statistics
from datetime import date
from typing import TYPE_CHECKING, Any

import numpy as np
import xarray as xr

from mosquito_suitability.datasources.climate.client import (
    ARCHIVE_API,
    DAILY_VARS,
    MONTHS,
    TEMPERATURE_NAME,
    TEMPERATURE_UNITS,
)
from mosquito_suitability.services.http import session

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from mosquito_suitability.schemas import BoundingBox


def build_grid_axes(
    bbox: BoundingBox, resolution: float
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Cell-centre latitudes and longitudes covering ``bbox``.

    Args:
        bbox: Study region.
        resolution: Cell size in degrees.

    Returns:
        ``(lats, lons)``, both ascending and rounded to 4 decimals.

    Raises:
        ValueError: If ``resolution`` is not positive or larger than the box.
    """
    if resolution <= 0:
        msg = f"resolution must be positive, got {resolution}"
        raise ValueError(msg)

    lats = np.arange(bbox.south + resolution / 2, bbox.north, resolution)
    lons = np.arange(bbox.west + resolution / 2, bbox.east, resolution)
    if lats.size == 0 or lons.size == 0:
        msg = f"resolution {resolution} is coarser than the bounding box"
        raise ValueError(msg)
    return lats.round(4), lons.round(4)


def monthly_means_from_daily(daily: dict[str, Any]) -> list[float]:
    """Average an Open-Meteo ``daily`` block into 12 monthly means.

    Months without any non-null value are NaN.
    """
    by_month: dict[int, list[float]] = {m: [] for m in MONTHS}
    for day_str, value in zip(daily.get("time", []), daily.get(DAILY_VARS, []), strict=False):
        if value is None:
            continue
        by_month[date.fromisoformat(day_str).month].append(float(value))

    return [statistics.fmean(v) if v else math.nan for v in by_month.values()]


def fetch_monthly_means(
    lats: list[float],
    lons: list[float],
    year: int,
) -> list[list[float]]:
    """Fetch one year of daily means for a batch of points.

    Args:
        lats: Point latitudes.
        lons: Point longitudes, same length as ``lats``.
        year: Calendar year.

    Returns:
        One 12-element list of monthly means (deg C) per point, in input order.

    Raises:
        requests.HTTPError: If the API request fails after retries.
    """
    params: dict[str, Any] = {
        "latitude": ",".join(f"{v:g}" for v in lats),
        "longitude": ",".join(f"{v:g}" for v in lons),
        "start_date": date(year, 1, 1).isoformat(),
        "end_date": date(year, 12, 31).isoformat(),
        "daily": DAILY_VARS,
        "timezone": "auto",
    }
    resp = session.get(ARCHIVE_API, params=params)
    resp.raise_for_status()
    payload = resp.json()

    # A single location comes back as an object, several as a list
    locations = payload if isinstance(payload, list) else [payload]
    if len(locations) != len(lats):
        msg = f"Expected {len(lats)} locations from archive API, got {len(locations)}"
        raise ValueError(msg)
    return [monthly_means_from_daily(loc.get("daily", {})) for loc in locations]


def fetch_temperature_grid(bbox: BoundingBox, resolution: float, year: int) -> xr.DataArray:
    """Fetch a ``(month, lat, lon)`` grid of monthly mean temperature.

    Args:
        bbox: Study region.
        resolution: Cell size in degrees.
        year: Calendar year to average.

    Returns:
        DataArray named ``tavg`` in deg C; NaN where the API had no data.
    """
    lats, lons = build_grid_axes(bbox, resolution)
    values = np.full((len(MONTHS), lats.size, lons.size), np.nan)

    for i, lat in enumerate(lats):
        row = fetch_monthly_means([float(lat)] * lons.size, [float(v) for v in lons], year)
        for j, monthly in enumerate(row):
            values[:, i, j] = monthly

    return xr.DataArray(
        values,
        dims=("month", "lat", "lon"),
        coords={"month": MONTHS, "lat": lats, "lon": lons},
        name=TEMPERATURE_NAME,
        attrs={"units": TEMPERATURE_UNITS, "year": year, "source": "open-meteo.com (archive)"},
    )
