"""Pure rendering functions: structured data -> HTML strings / PNG images.

All renderers follow the same pattern:
  - Input: DataArray, DataFrame or dataclasses (from analysis/)
  - Output: str (HTML fragment, or a base64 PNG for an ``<img>`` data URI)
  - No side effects, no I/O, no Prefect decorators

Figures use matplotlib's object API (``matplotlib.figure.Figure``), never
``pyplot``, so rendering works headless and leaves no global figure state.

Used by flows/build.py which orchestrates the rendering pipeline.

Public API:
  - figures: figure_to_base64
  - rate_maps: build_rate_maps_png, build_favoured_map_png
  - curves: build_curves_png
  - summary_table: build_summary_table_html, build_species_cards_html
  - report: build_report_html
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
