"""Reaction-norm parameter sets for the two compared species.

Development-rate Briere fits (deg C, 1/day). Override them with a JSON file
(``MOSQUITO_SPECIES_FILE``) shaped like::

    [
      {"key": "species_a", "name": "Species A",
       "parameters": {"tmin": 8.7, "tmax": 39.6, "scale": 6.33e-5}},
      ...
    ]
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pydantic import TypeAdapter

from mosquito_suitability.schemas import Species, SpeciesParameters

if TYPE_CHECKING:
    from pathlib import Path

SPECIES_A = Species(
    key="species_a",
    name="Species A",
    parameters=SpeciesParameters(tmin=8.7, tmax=39.6, scale=6.33e-5),
)

SPECIES_B = Species(
    key="species_b",
    name="Species B",
    parameters=SpeciesParameters(tmin=0.1, tmax=38.5, scale=3.76e-5),
)

DEFAULT_SPECIES: tuple[Species, ...] = (SPECIES_A, SPECIES_B)

_species_list = TypeAdapter(list[Species])


def load_species(path: Path | None = None) -> list[Species]:
    """Load species parameter sets from a JSON file, or return the defaults.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        pydantic.ValidationError: If any entry breaks a parameter invariant.
        ValueError: If two entries share a key.
    """
    if path is None:
        return list(DEFAULT_SPECIES)

    with path.open() as f:
        raw = json.load(f)
    species = _species_list.validate_python(raw)

    keys = [s.key for s in species]
    duplicates = sorted({k for k in keys if keys.count(k) > 1})
    if duplicates:
        msg = f"Duplicate species keys in {path}: {', '.join(duplicates)}"
        raise ValueError(msg)
    return species
