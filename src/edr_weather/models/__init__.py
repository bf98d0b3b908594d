"""
Data models for the EDR weather client.

Contains DTOs for coverage records, locations and collections.
"""

from .coverage import (
    TimeSeriesPoint,
    GridPoint,
    DailyAggregate,
    CurrentConditions,
    ActivitySuggestion,
    StationObservation,
)
from .location import City, WeatherStation, Collection

__all__ = [
    "TimeSeriesPoint",
    "GridPoint",
    "DailyAggregate",
    "CurrentConditions",
    "ActivitySuggestion",
    "StationObservation",
    "City",
    "WeatherStation",
    "Collection",
]
