"""Gridded monthly temperature (deg C) for the study region.

Public API:
  - client: ARCHIVE_API, DAILY_VARS, MONTHS, TEMPERATURE_NAME, TEMPERATURE_UNITS
  - grid: build_grid_axes, monthly_means_from_daily, fetch_monthly_means,
          fetch_temperature_grid
  - files: load_temperature_grid, normalize_grid
  - serialization: grid_to_dict, grid_from_dict
"""

from mosquito_suitability.datasources.climate.client import (
    ARCHIVE_API,
    DAILY_VARS,
    MONTHS,
    TEMPERATURE_NAME,
    TEMPERATURE_UNITS,
)
from mosquito_suitability.datasources.climate.files import load_temperature_grid, normalize_grid
from mosquito_suitability.datasources.climate.grid import (
    build_grid_axes,
    fetch_monthly_means,
    fetch_temperature_grid,
    monthly_means_from_daily,
)
from mosquito_suitability.datasources.climate.serialization import grid_from_dict, grid_to_dict

__all__ = [
    "ARCHIVE_API",
    "DAILY_VARS",
    "MONTHS",
    "TEMPERATURE_NAME",
    "TEMPERATURE_UNITS",
    "build_grid_axes",
    "fetch_monthly_means",
    "fetch_temperature_grid",
    "grid_from_dict",
    "grid_to_dict",
    "load_temperature_grid",
    "monthly_means_from_daily",
    "normalize_grid",
]
