"""Load temperature grids from local files (netCDF or anything xarray opens)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import xarray as xr

from mosquito_suitability.datasources.climate.client import TEMPERATURE_NAME, TEMPERATURE_UNITS

if TYPE_CHECKING:
    from pathlib import Path

_DIM_ALIASES = {
    "latitude": "lat",
    "y": "lat",
    "longitude": "lon",
    "x": "lon",
}


def normalize_grid(da: xr.DataArray) -> xr.DataArray:
    """Rename dims to ``lat``/``lon``/``month`` and order them ``(month, lat, lon)``.

    A ``time`` dimension is turned into ``month`` by averaging per calendar
    month, so a multi-year monthly series collapses to a 12-layer climatology.

    Raises:
        ValueError: If the result lacks ``lat``/``lon`` or has extra dims.
    """
    renames = {d: _DIM_ALIASES[d] for d in da.dims if d in _DIM_ALIASES}
    if renames:
        da = da.rename(renames)

    if "time" in da.dims:
        da = da.groupby("time.month").mean("time", keep_attrs=True)

    missing = {"lat", "lon"} - set(da.dims)
    if missing:
        msg = f"Temperature grid is missing dimension(s): {', '.join(sorted(missing))}"
        raise ValueError(msg)
    extra = set(da.dims) - {"month", "lat", "lon"}
    if extra:
        msg = f"Unexpected dimension(s) in temperature grid: {', '.join(sorted(extra))}"
        raise ValueError(msg)

    order = [d for d in ("month", "lat", "lon") if d in da.dims]
    return da.transpose(*order)


def load_temperature_grid(path: Path, variable: str | None = None) -> xr.DataArray:
    """Open a gridded temperature file as a normalised DataArray.

    Args:
        path: File readable by ``xarray.open_dataset`` (netCDF, zarr, ...).
        variable: Data variable to read; defaults to the first one.

    Returns:
        In-memory DataArray named ``tavg`` with dims ``(month, lat, lon)``
        or ``(lat, lon)``. Kelvin inputs are converted to deg C.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        KeyError: If ``variable`` is not in the file.
    """
    if not path.exists():
        msg = f"Temperature grid not found: {path}"
        raise FileNotFoundError(msg)

    with xr.open_dataset(path) as ds:
        name = variable or next(iter(ds.data_vars))
        da = ds[name].load()

    if da.attrs.get("units", "").lower() in ("k", "kelvin"):
        da = da - 273.15
        da.attrs["units"] = TEMPERATURE_UNITS

    da = normalize_grid(da)
    da.name = TEMPERATURE_NAME
    da.attrs.setdefault("units", TEMPERATURE_UNITS)
    da.attrs.setdefault("source", str(path))
    return da
