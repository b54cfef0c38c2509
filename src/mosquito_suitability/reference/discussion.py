"""Open-ended questions shown at the end of the suitability report."""

DISCUSSION_QUESTIONS: tuple[str, ...] = (
    "Which species shows the higher development rate across the region, "
    "and in which months does that change?",
    "Where do the maps show zero development all year? Is that a thermal "
    "limit, or missing climate data?",
    "Monthly means hide daily extremes. How might using daily maximum and "
    "minimum temperatures change the picture near each species' thresholds?",
    "Development rate is only one trait. What other temperature-dependent "
    "traits (survival, biting rate, fecundity) would you add before drawing "
    "conclusions about transmission risk?",
    "How would you communicate the uncertainty in these maps to a "
    "public-health decision maker?",
)
