"""
Prefect flow for building the suitability report.

Loads the temperature grid (cached fetch or a local file), evaluates each
species' reaction norm on it, and writes an HTML report plus CSVs of the
per-cell rates and the monthly regional statistics.

Run locally:
    python -m mosquito_suitability.flows.build
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from prefect import flow, task
from prefect.cache_policies import NONE

from mosquito_suitability.analysis import (
    compare_species,
    evaluate_species,
    favoured_species,
    monthly_summary,
    summaries_to_dict,
    to_long_frame,
)
from mosquito_suitability.config import get_settings
from mosquito_suitability.datasources import climate
from mosquito_suitability.flows.fetch import climate_path
from mosquito_suitability.reference import load_species
from mosquito_suitability.renderers.curves import build_curves_png
from mosquito_suitability.renderers.rate_maps import build_favoured_map_png, build_rate_maps_png
from mosquito_suitability.renderers.report import build_report_html
from mosquito_suitability.renderers.summary_table import (
    build_species_cards_html,
    build_summary_table_html,
)
from mosquito_suitability.schemas import BoundingBox
from mosquito_suitability.store import DataStore

if TYPE_CHECKING:
    import pandas as pd
    import xarray as xr

    from mosquito_suitability.analysis import SpeciesSummary
    from mosquito_suitability.schemas import Species

store = DataStore(get_settings().data_dir)

SITE_PATH = Path("derived/site/index.html")
SUMMARY_CSV_PATH = Path("derived/monthly_summary.csv")
SUMMARY_JSON_PATH = Path("derived/species_summary.json")
RATES_CSV_PATH = Path("derived/development_rates.csv")


# =============================================================================
# Data loading tasks
# =============================================================================


@task(name="load-climate-grid", cache_policy=NONE)
def load_climate_grid(
    year: int,
    grid_file: Path | None = None,
    variable: str | None = None,
) -> xr.DataArray | None:
    """Load the temperature grid from ``grid_file`` if given, else from the store."""
    if grid_file is not None:
        return climate.load_temperature_grid(grid_file, variable)

    data = store.read(climate_path(year))
    if data is None:
        return None
    return climate.grid_from_dict(data)


def grid_region(year: int, grid_file: Path | None, default: BoundingBox) -> BoundingBox:
    """Region the loaded grid covers: the cached fetch's region, else ``default``."""
    if grid_file is not None:
        return default
    region = store.meta(climate_path(year)).get("region")
    if not region:
        return default
    return BoundingBox.model_validate(region)


@task(name="load-species")
def load_species_sets(species_file: Path | None = None) -> list[Species]:
    """Load species parameter sets (defaults unless a file is configured)."""
    return load_species(species_file)


# =============================================================================
# Analysis and rendering tasks
# =============================================================================


@task(name="evaluate-species", cache_policy=NONE)
def evaluate(grid: xr.DataArray, species: list[Species]) -> xr.DataArray:
    """Evaluate every species' development rate over the grid."""
    return evaluate_species(grid, species)


@task(name="build-html", cache_policy=NONE)
def build_html(
    rates: xr.DataArray,
    summary: pd.DataFrame,
    summaries: list[SpeciesSummary],
    species: list[Species],
    bbox: BoundingBox,
    year: int | str,
) -> str:
    """Render all figures and tables into the report page."""
    return build_report_html(
        species=species,
        bbox=bbox,
        year=year,
        updated=datetime.now().astimezone().strftime("%Y-%m-%d %H:%M"),
        curves_png=build_curves_png(species),
        rate_maps_png=build_rate_maps_png(rates),
        favoured_map_png=build_favoured_map_png(favoured_species(rates), [s.key for s in species]),
        summary_table_html=build_summary_table_html(summary),
        species_cards_html=build_species_cards_html(summaries),
    )


@task(name="write-outputs", cache_policy=NONE)
def write_outputs(
    html: str,
    summary: pd.DataFrame,
    summaries: list[SpeciesSummary],
    long_frame: pd.DataFrame,
) -> Path:
    """Write the report page, the per-cell and summary CSVs and the species JSON."""
    store.write_text(RATES_CSV_PATH, long_frame.to_csv(index=False))
    store.write_text(SUMMARY_CSV_PATH, summary.to_csv(index=False))
    store.write(
        SUMMARY_JSON_PATH,
        summaries_to_dict(summaries),
        source="mosquito-suitability",
    )
    return store.write_text(SITE_PATH, html)


# =============================================================================
# Main flow
# =============================================================================


@flow(name="build-report", log_prints=True)
def build_all(year: int | None = None) -> dict[str, Any]:
    """
    Build the suitability report from the cached or configured grid.

    This is the main Prefect flow that generates the static site.
    """
    settings = get_settings()
    year = year if year is not None else settings.climate_year

    print("Loading temperature grid...")
    grid = load_climate_grid(year, settings.grid_file, settings.grid_variable)
    if grid is None:
        print("No climate grid found. Run fetch flow first.")
        return {"error": "no data"}
    if "month" not in grid.dims:
        print("Temperature grid has no month dimension; cannot build monthly report.")
        return {"error": "no month dimension"}

    print("Loading species parameters...")
    species = load_species_sets(settings.species_file)
    print(f"Comparing {', '.join(s.name for s in species)}")

    print("Evaluating reaction norms...")
    rates = evaluate(grid, species)
    summary = monthly_summary(rates)
    summaries = compare_species(rates)
    for s in summaries:
        print(f"{s.name}: peak month {s.peak_month}, mean rate {s.annual_mean_rate:.3f}/day")

    print("Building HTML...")
    report_year = grid.attrs.get("year", year)
    bbox = grid_region(year, settings.grid_file, settings.bbox)
    html = build_html(rates, summary, summaries, species, bbox, report_year)

    print("Writing outputs...")
    output_path = write_outputs(html, summary, summaries, to_long_frame(rates, grid))

    print(f"Report built: {output_path}")
    return {
        "output": str(output_path),
        "species": [s.key for s in species],
        "months": int(grid.sizes["month"]),
    }


if __name__ == "__main__":
    result = build_all()
    print(f"Flow complete: {result}")
