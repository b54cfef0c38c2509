"""Shared fixtures: a small monthly temperature grid."""

from __future__ import annotations

import numpy as np
import pytest
import xarray as xr

# Month 1 sits between the two lower thresholds (only species B develops),
# month 7 is warm with one missing cell, month 12 is below both thresholds.
COLD = 5.0
WARM = 25.0
FREEZING = -2.0


@pytest.fixture
def temperature_grid() -> xr.DataArray:
    values = np.empty((3, 2, 3))
    values[0] = COLD
    values[1] = WARM
    values[1, 0, 0] = np.nan
    values[2] = FREEZING
    return xr.DataArray(
        values,
        dims=("month", "lat", "lon"),
        coords={"month": [1, 7, 12], "lat": [45.5, 46.5], "lon": [-122.5, -121.5, -120.5]},
        name="tavg",
        attrs={"units": "degC", "year": 2023},
    )
