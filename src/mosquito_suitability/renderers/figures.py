"""Shared matplotlib helpers."""

from __future__ import annotations

import base64
import calendar
from io import BytesIO
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from matplotlib.figure import Figure

RATE_LABEL = "Development rate (1/day)"
RATE_CMAP = "viridis"


def month_label(month: int) -> str:
    """Three-letter month abbreviation (1 = Jan)."""
    return calendar.month_abbr[month]


def figure_to_base64(fig: Figure, dpi: int = 110) -> str:
    """Encode a figure as a base64 PNG string for an ``<img src="data:...">``."""
    buf = BytesIO()
    fig.savefig(buf, format="png", dpi=dpi, bbox_inches="tight")
    return base64.b64encode(buf.getvalue()).decode("ascii")
