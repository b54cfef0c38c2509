"""Faceted development-rate maps.

One row per species, one column per month, all panels on a shared colour
scale so species and months can be compared by eye.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from matplotlib.colors import ListedColormap
from matplotlib.figure import Figure
from matplotlib.patches import Patch

from mosquito_suitability.analysis import NO_SPECIES
from mosquito_suitability.renderers.figures import (
    RATE_CMAP,
    RATE_LABEL,
    figure_to_base64,
    month_label,
)

if TYPE_CHECKING:
    import xarray as xr

# Categorical colours for the favoured-species map; grey is "none"
_NONE_COLOR = "#d9d9d9"
_SPECIES_COLORS = ["#1b9e77", "#d95f02", "#7570b3", "#e7298a", "#66a61e"]


def build_rate_maps_png(rates: xr.DataArray, panel_size: float = 1.6) -> str:
    """Render stacked species rates as a species x month grid of maps.

    Args:
        rates: Output of ``analysis.evaluate_species``; ``(species, [month,] lat, lon)``.
        panel_size: Width/height of each panel in inches.

    Returns:
        Base64-encoded PNG.
    """
    if "month" in rates.dims:
        months = [int(m) for m in rates["month"].values]
    else:
        rates = rates.expand_dims(month=[0])
        months = [0]
    species_keys = list(rates["species"].values)
    names = list(rates["species_name"].values) if "species_name" in rates.coords else species_keys

    vmax = float(rates.max())
    if vmax <= 0:
        vmax = 1.0

    nrows, ncols = len(species_keys), len(months)
    fig = Figure(figsize=(panel_size * ncols + 1.2, panel_size * nrows + 0.6))
    axes = fig.subplots(nrows, ncols, squeeze=False, sharex=True, sharey=True)

    lons = rates["lon"].values
    lats = rates["lat"].values
    mesh = None
    for i, key in enumerate(species_keys):
        for j, month in enumerate(months):
            ax = axes[i][j]
            panel = rates.sel(species=key, month=month).transpose("lat", "lon").values
            mesh = ax.pcolormesh(
                lons, lats, panel, cmap=RATE_CMAP, vmin=0.0, vmax=vmax, shading="auto"
            )
            ax.set_xticks([])
            ax.set_yticks([])
            if i == 0 and month:
                ax.set_title(month_label(month), fontsize=9)
            if j == 0:
                ax.set_ylabel(str(names[i]), fontsize=9)

    if mesh is not None:
        fig.colorbar(mesh, ax=axes, label=RATE_LABEL, shrink=0.8)
    return figure_to_base64(fig)


def build_favoured_map_png(labels: xr.DataArray, species_order: list[str]) -> str:
    """Render which species develops fastest in each cell, one panel per month.

    Args:
        labels: Output of ``analysis.favoured_species``.
        species_order: Species keys in legend order.

    Returns:
        Base64-encoded PNG.
    """
    categories = [NO_SPECIES, *species_order]
    colors = [_NONE_COLOR] + [
        _SPECIES_COLORS[i % len(_SPECIES_COLORS)] for i in range(len(species_order))
    ]
    cmap = ListedColormap(colors)
    codes = {label: code for code, label in enumerate(categories)}

    if "month" not in labels.dims:
        labels = labels.expand_dims(month=[0])
    months = [int(m) for m in labels["month"].values]

    ncols = min(6, len(months))
    nrows = -(-len(months) // ncols)
    fig = Figure(figsize=(1.8 * ncols, 1.8 * nrows + 0.5))
    axes = fig.subplots(nrows, ncols, squeeze=False, sharex=True, sharey=True)

    lons = labels["lon"].values
    lats = labels["lat"].values
    for idx, ax in enumerate(axes.flat):
        ax.set_xticks([])
        ax.set_yticks([])
        if idx >= len(months):
            ax.set_visible(False)
            continue
        month = months[idx]
        panel = labels.sel(month=month).transpose("lat", "lon").values
        coded = np.vectorize(codes.__getitem__, otypes=[float])(panel)
        ax.pcolormesh(
            lons, lats, coded, cmap=cmap, vmin=-0.5, vmax=len(categories) - 0.5, shading="auto"
        )
        if month:
            ax.set_title(month_label(month), fontsize=9)

    handles = [Patch(color=c, label=label) for c, label in zip(colors, categories, strict=True)]
    fig.legend(handles=handles, loc="lower center", ncol=len(categories), fontsize=8)
    return figure_to_base64(fig)
