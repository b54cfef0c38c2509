"""JSON serialization helpers for temperature grids.

Grids are stored as plain dicts (coords + nested value lists) so they fit
the store's JSON envelope. Values keep full float precision; NaN cells
become ``null``.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
import xarray as xr

from mosquito_suitability.datasources.climate.client import TEMPERATURE_NAME


def _nan_to_none(values: Any) -> Any:
    if isinstance(values, list):
        return [_nan_to_none(v) for v in values]
    if isinstance(values, float) and math.isnan(values):
        return None
    return values


def grid_to_dict(grid: xr.DataArray) -> dict[str, Any]:
    """Serialize a temperature grid to a JSON-compatible dict.

    Args:
        grid: DataArray with 1-D coordinate variables on every dim.

    Returns:
        Dict with ``dims``, ``coords``, ``values`` and ``attrs``.
    """
    return {
        "name": grid.name,
        "dims": list(grid.dims),
        "coords": {dim: grid[dim].values.tolist() for dim in grid.dims},
        "values": _nan_to_none(grid.values.astype(np.float64).tolist()),
        "attrs": {k: v for k, v in grid.attrs.items() if isinstance(v, (str, int, float))},
    }


def grid_from_dict(data: dict[str, Any]) -> xr.DataArray:
    """Rebuild a DataArray written by :func:`grid_to_dict`.

    Raises:
        ValueError: If required keys are missing.
    """
    try:
        dims = tuple(data["dims"])
        coords = {dim: data["coords"][dim] for dim in dims}
        values = np.array(data["values"], dtype=np.float64)  # None -> nan
    except KeyError as e:
        msg = f"Serialized grid is missing key: {e}"
        raise ValueError(msg) from None

    return xr.DataArray(
        values,
        dims=dims,
        coords=coords,
        name=data.get("name") or TEMPERATURE_NAME,
        attrs=dict(data.get("attrs", {})),
    )
