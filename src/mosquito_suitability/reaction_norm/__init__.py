"""Briere reaction norms: temperature -> development rate.

The one piece of domain math in the project. Everything else loads grids
around it, reshapes its output, or draws it.

Public API:
  - compute: evaluate, evaluate_array, evaluate_grid, thermal_optimum,
             reaction_norm_curve
"""

from mosquito_suitability.reaction_norm.compute import (
    RATE_NAME,
    RATE_UNITS,
    evaluate,
    evaluate_array,
    evaluate_grid,
    reaction_norm_curve,
    thermal_optimum,
)

__all__ = [
    "RATE_NAME",
    "RATE_UNITS",
    "evaluate",
    "evaluate_array",
    "evaluate_grid",
    "reaction_norm_curve",
    "thermal_optimum",
]
