"""Open-Meteo archive API constants for gridded climate requests."""

# Historical reanalysis (ERA5-based) daily values
ARCHIVE_API = "https://archive-api.open-meteo.com/v1/archive"

DAILY_VARS = "temperature_2m_mean"

# Grid variable name and units used throughout the pipeline
TEMPERATURE_NAME = "tavg"
TEMPERATURE_UNITS = "degC"

MONTHS = list(range(1, 13))
