"""Cross-species comparison of reaction-norm output.

Dependency rule: analysis/ takes grids and species models as arguments. It
never fetches data, touches the store, or produces HTML.

Modules:
  - species_comparison: stacked rates, tidy frames, monthly statistics,
    per-cell favoured species, yearly summaries
"""

from mosquito_suitability.analysis.species_comparison import (
    NO_SPECIES,
    SpeciesSummary,
    compare_species,
    evaluate_species,
    favoured_species,
    monthly_summary,
    summaries_to_dict,
    to_long_frame,
)

__all__ = [
    "NO_SPECIES",
    "SpeciesSummary",
    "compare_species",
    "evaluate_species",
    "favoured_species",
    "monthly_summary",
    "summaries_to_dict",
    "to_long_frame",
]
