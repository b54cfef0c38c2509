"""Static reference data: species parameter sets and report text.

Modules:
  - species: SPECIES_A, SPECIES_B, DEFAULT_SPECIES, load_species
  - discussion: DISCUSSION_QUESTIONS
"""

from mosquito_suitability.reference.discussion import DISCUSSION_QUESTIONS
from mosquito_suitability.reference.species import (
    DEFAULT_SPECIES,
    SPECIES_A,
    SPECIES_B,
    load_species,
)

__all__ = [
    "DEFAULT_SPECIES",
    "DISCUSSION_QUESTIONS",
    "SPECIES_A",
    "SPECIES_B",
    "load_species",
]
