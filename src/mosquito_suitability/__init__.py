"""Mosquito Suitability - thermal suitability of mosquito species from climate grids.

Architecture::

    reaction_norm/ Briere development-rate curve, scalar and grid-wide
    datasources/   Monthly temperature grids (Open-Meteo archive, local files)
    store.py       JSON store with freshness envelopes (climate → derived)
    analysis/      Species comparison: stacked rates, monthly stats, winners
    renderers/     Pure data → PNG/HTML (rate maps, curves, tables, report)
    flows/         Prefect orchestration (fetch caches grid, build writes report)
    reference/     Species parameter sets and discussion questions

Data flow: datasources → store → reaction_norm → analysis → renderers → derived/site/
"""

__version__ = "0.1.0"

from mosquito_suitability.config import Settings
from mosquito_suitability.schemas import BoundingBox, Species, SpeciesParameters

__all__ = ["BoundingBox", "Settings", "Species", "SpeciesParameters", "__version__"]
