"""
EDR Weather Client

This package queries the FMI Open Data OGC EDR API and turns CoverageJSON
responses into time series, grid points and daily aggregates for display.
"""

__version__ = "0.1.0"
__description__ = "CoverageJSON decoding and aggregation for the FMI EDR API"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "WeatherApp":
        from .main import WeatherApp
        return WeatherApp
    if name == "ForecastService":
        from .services import ForecastService
        return ForecastService
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "WeatherApp",
    "ForecastService",
]
