"""Pure Briere reaction-norm functions (no I/O).

Development rate as a function of temperature T (Briere-1 form):

    rate = scale * T * (T - tmin) * sqrt(tmax - T)

The curve is only meaningful on the open interval (tmin, tmax). Every value
outside it is clamped to zero by an ordered list of guards:

    1. T is missing (NaN)              -> 0
    2. T <= tmin                       -> 0
    3. raw rate is not a finite real   -> 0   (T > tmax makes the root undefined)
    4. raw rate <= 0                   -> 0
    5. otherwise                       -> raw rate

All guards yield the same value, so their order never changes the output.
Missing cells become zero, not NaN.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, overload

import numpy as np
import xarray as xr

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

    from mosquito_suitability.schemas import SpeciesParameters

RATE_UNITS = "1/day"
RATE_NAME = "development_rate"


def evaluate(temp: float | None, params: SpeciesParameters) -> float:
    """Development rate for a single temperature.

    Args:
        temp: Temperature in deg C. ``None`` or NaN mark a missing value.
        params: Species reaction-norm parameters.

    Returns:
        Development rate (1/day), never negative and never NaN.
    """
    if temp is None or math.isnan(temp):
        return 0.0
    if temp <= params.tmin:
        return 0.0

    headroom = params.tmax - temp
    if headroom < 0:
        return 0.0
    raw = params.scale * temp * (temp - params.tmin) * math.sqrt(headroom)
    if not math.isfinite(raw):
        return 0.0

    if raw <= 0:
        return 0.0
    return raw


def evaluate_array(temps: ArrayLike, params: SpeciesParameters) -> NDArray[np.float64]:
    """Vectorised :func:`evaluate` over an array of any shape.

    The guards are applied as boolean masks in the same order as the scalar
    version, so both agree element for element (NaN and +/-inf included).
    """
    t = np.asarray(temps, dtype=np.float64)
    headroom = params.tmax - t

    with np.errstate(invalid="ignore", over="ignore"):
        raw = params.scale * t * (t - params.tmin) * np.sqrt(headroom)

        keep = ~np.isnan(t)
        keep &= t > params.tmin
        keep &= headroom >= 0
        keep &= np.isfinite(raw)
        keep &= raw > 0

    return np.where(keep, raw, 0.0)


@overload
def evaluate_grid(grid: xr.DataArray, params: SpeciesParameters) -> xr.DataArray: ...


@overload
def evaluate_grid(grid: np.ndarray, params: SpeciesParameters) -> NDArray[np.float64]: ...


def evaluate_grid(
    grid: xr.DataArray | np.ndarray, params: SpeciesParameters
) -> xr.DataArray | NDArray[np.float64]:
    """Apply the reaction norm to every cell of a 2-D or 3-D temperature grid.

    For an ``xarray.DataArray`` the result keeps the input's dims and coords,
    is renamed ``development_rate`` and carries ``units = "1/day"``. A bare
    numpy array gives a numpy array of the same shape. The input is never
    modified.

    Raises:
        ValueError: If the grid is not 2-D or 3-D.
    """
    if grid.ndim not in (2, 3):
        msg = f"Temperature grid must be 2-D or 3-D, got {grid.ndim}-D"
        raise ValueError(msg)

    if isinstance(grid, xr.DataArray):
        rates = grid.copy(data=evaluate_array(grid.values, params))
        rates.name = RATE_NAME
        rates.attrs = {**grid.attrs, "units": RATE_UNITS, "long_name": "development rate"}
        return rates

    return evaluate_array(grid, params)


def thermal_optimum(params: SpeciesParameters) -> float:
    """Temperature (deg C) at which the Briere curve peaks.

    Root of d(rate)/dT = 0 inside (tmin, tmax)::

        T_opt = (4*tmax + 3*tmin + sqrt((4*tmax + 3*tmin)**2 - 40*tmin*tmax)) / 10
    """
    b = 4 * params.tmax + 3 * params.tmin
    return (b + math.sqrt(b * b - 40 * params.tmin * params.tmax)) / 10


def reaction_norm_curve(
    params: SpeciesParameters,
    start: float = 0.0,
    stop: float = 45.0,
    step: float = 0.1,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Sample the reaction norm on a regular temperature axis for plotting.

    Returns:
        ``(temperatures, rates)`` arrays of equal length; ``stop`` is included
        when it falls on the step.
    """
    if step <= 0:
        msg = f"step must be positive, got {step}"
        raise ValueError(msg)
    count = int(round((stop - start) / step)) + 1
    temps = start + step * np.arange(count, dtype=np.float64)
    return temps, evaluate_array(temps, params)
