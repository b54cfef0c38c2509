"""Full report page: figures, tables and discussion questions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mosquito_suitability.reaction_norm import thermal_optimum
from mosquito_suitability.reference import DISCUSSION_QUESTIONS
from mosquito_suitability.renderers import render_template

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mosquito_suitability.schemas import BoundingBox, Species


def build_report_html(
    *,
    species: Sequence[Species],
    bbox: BoundingBox,
    year: int | str,
    updated: str,
    curves_png: str,
    rate_maps_png: str,
    favoured_map_png: str,
    summary_table_html: str,
    species_cards_html: str,
    questions: Sequence[str] = DISCUSSION_QUESTIONS,
) -> str:
    """Assemble the standalone HTML report.

    Images are base64 PNG strings and get inlined as data URIs, so the
    page has no external files.
    """
    parameters = [
        {
            "name": s.name,
            "tmin": f"{s.parameters.tmin:g}",
            "tmax": f"{s.parameters.tmax:g}",
            "scale": f"{s.parameters.scale:.3g}",
            "t_opt": f"{thermal_optimum(s.parameters):.1f}",
        }
        for s in species
    ]
    return render_template(
        "report.html.j2",
        parameters=parameters,
        bbox=bbox,
        year=year,
        updated=updated,
        curves_png=curves_png,
        rate_maps_png=rate_maps_png,
        favoured_map_png=favoured_map_png,
        summary_table=summary_table_html,
        species_cards=species_cards_html,
        questions=list(questions),
    )
