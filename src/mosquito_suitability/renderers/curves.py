"""Reaction-norm curve chart: development rate vs temperature per species."""

from __future__ import annotations

from typing import TYPE_CHECKING

from matplotlib.figure import Figure

from mosquito_suitability.reaction_norm import reaction_norm_curve, thermal_optimum
from mosquito_suitability.renderers.figures import RATE_LABEL, figure_to_base64

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mosquito_suitability.schemas import Species


def build_curves_png(
    species: Sequence[Species],
    t_start: float = -5.0,
    t_stop: float = 45.0,
) -> str:
    """Plot each species' Briere curve with its thermal optimum marked.

    Returns:
        Base64-encoded PNG.
    """
    fig = Figure(figsize=(6.5, 3.8))
    ax = fig.subplots()

    for s in species:
        temps, rates = reaction_norm_curve(s.parameters, t_start, t_stop, 0.1)
        (line,) = ax.plot(temps, rates, label=s.name)
        t_opt = thermal_optimum(s.parameters)
        ax.axvline(t_opt, color=line.get_color(), linestyle="--", linewidth=0.8)

    ax.set_xlabel("Temperature (\N{DEGREE SIGN}C)")
    ax.set_ylabel(RATE_LABEL)
    ax.set_xlim(t_start, t_stop)
    ax.set_ylim(bottom=0)
    ax.grid(alpha=0.3)
    if species:
        ax.legend(frameon=False)
    return figure_to_base64(fig)
