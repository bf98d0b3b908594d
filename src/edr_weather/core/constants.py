"""
Application-wide constants for the EDR weather client.

This module defines default values and constants used throughout the application.
Color scales and symbol ranges are defined in their respective modules.
"""

# EDR API
DEFAULT_BASE_URL = "https://opendata.fmi.fi/edr"
DEFAULT_COLLECTION = "pal_skandinavia"  # PAL-AROME forecast model
OBSERVATION_COLLECTION = "opendata"
DEFAULT_FORMAT = "CoverageJSON"

# Timeouts are configured in milliseconds; None disables the timeout
DEFAULT_TIMEOUT_MS = None
QUICK_LOAD_TIMEOUT_MS = 8000  # default-city quick-load path

# Retries are off in the baseline request behavior
DEFAULT_MAX_RETRIES = 0

# Fan-out worker count for multi-location queries
DEFAULT_FETCH_WORKERS = 4

# Display
DEFAULT_DISPLAY_TIMEZONE = "Europe/Helsinki"
DEFAULT_FORECAST_DAYS = 7

# Scandinavia bounds as (min_lon, min_lat, max_lon, max_lat)
SCANDINAVIA_BOUNDS = (5.0, 55.0, 31.0, 71.0)

# Coordinate precision for POINT(lon lat) strings
COORDINATE_DECIMALS = 4

# Parameter sets used by the views
CURRENT_WEATHER_PARAMETERS = ["Temperature", "WindSpeedMS", "Humidity", "TotalCloudCover"]
DAILY_FORECAST_PARAMETERS = ["Temperature", "WindSpeedMS", "WeatherSymbol3"]
HOURLY_FORECAST_PARAMETERS = [
    "Temperature",
    "WindSpeedMS",
    "WindDirection",
    "Precipitation1h",
    "PoP",
]
STATION_OBSERVATION_PARAMETERS = [
    "ta_pt1m_avg",  # air temperature, 1 min average
    "ws_pt10m_avg",  # wind speed, 10 min average
    "wd_pt10m_avg",  # wind direction, 10 min average
    "wg_pt1h_max",  # gust speed, 1 h maximum
    "pa_pt1m_avg",  # air pressure, 1 min average
]

# Cloud cover (%) to weather symbol
CLEAR_SKY_MAX_CLOUD = 20
PARTLY_CLOUDY_MAX_CLOUD = 50

# Fallback synthesizer
SYNTHETIC_STEP_MINUTES = 60
SYNTHETIC_START = "2025-01-01T00:00:00Z"
