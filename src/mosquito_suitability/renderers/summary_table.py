"""Monthly summary table and per-species cards."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mosquito_suitability.renderers import render_template
from mosquito_suitability.renderers.figures import month_label

if TYPE_CHECKING:
    import pandas as pd

    from mosquito_suitability.analysis import SpeciesSummary


def build_summary_table_html(summary: pd.DataFrame) -> str:
    """Render ``analysis.monthly_summary`` output as a month x species table.

    Each cell shows the regional mean rate and, underneath, the percentage
    of grid cells where any development happens.
    """
    species = list(dict.fromkeys(summary["species_name"]))
    rows: list[dict[str, Any]] = []
    for month, group in summary.groupby("month", sort=True):
        by_name = {r.species_name: r for r in group.itertuples(index=False)}
        cells = []
        for name in species:
            r = by_name.get(name)
            if r is None:
                cells.append({"mean": "–", "suitable": ""})
            else:
                cells.append(
                    {
                        "mean": f"{r.mean_rate:.3f}",
                        "suitable": f"{r.suitable_fraction * 100:.0f}%",
                    }
                )
        rows.append({"month": month_label(int(month)), "cells": cells})

    return render_template("summary_table.html.j2", species=species, rows=rows)


def build_species_cards_html(summaries: list[SpeciesSummary]) -> str:
    """Render one card per species with peak month and months it leads."""
    cards = [
        {
            "name": s.name,
            "peak_month": month_label(s.peak_month),
            "peak_rate": f"{s.peak_mean_rate:.3f}",
            "annual_rate": f"{s.annual_mean_rate:.3f}",
            "leading": ", ".join(month_label(m) for m in s.months_leading) or "none",
        }
        for s in summaries
    ]
    return render_template("species_cards.html.j2", cards=cards)
