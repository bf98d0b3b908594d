"""
Coverage data models.

Contains DTOs for records derived from CoverageJSON responses.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional, Dict, Any, Mapping


def _frozen_values(values: Mapping[str, Optional[float]]) -> Mapping[str, Optional[float]]:
    """Read-only copy of a field -> value mapping."""
    return MappingProxyType(dict(values))


@dataclass(frozen=True)
class TimeSeriesPoint:
    """One time step of a point query, index-aligned with the source time axis."""

    time: str  # Original ISO timestamp
    timestamp_millis: int  # Epoch milliseconds
    values: Mapping[str, Optional[float]] = field(default_factory=dict)
    label: Optional[str] = None  # Local time label, attached by the builder

    def __post_init__(self):
        object.__setattr__(self, "values", _frozen_values(self.values))

    def __hash__(self):
        return hash((self.time, self.timestamp_millis, tuple(sorted(self.values.items())), self.label))

    def __getitem__(self, name: str) -> Optional[float]:
        return self.values[name]

    def get(self, name: str, default: Optional[float] = None) -> Optional[float]:
        return self.values.get(name, default)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten to {'time': ..., <field>: value, ...}."""
        record: Dict[str, Any] = {"time": self.time}
        record.update(self.values)
        return record


@dataclass(frozen=True)
class GridPoint:
    """One cell of an area query at a fixed time step."""

    longitude: float
    latitude: float
    value: Optional[float]
    presentation_color: Optional[str] = None


@dataclass(frozen=True)
class DailyAggregate:
    """Reduction of one UTC calendar day of time series values."""

    date: str  # YYYY-MM-DD (UTC)
    min: float
    max: float
    mean: float
    count: int  # Number of non-null samples
    modal_category: Optional[float] = None


@dataclass(frozen=True)
class CurrentConditions:
    """Snapshot of the first forecast step for a location."""

    timestamp: str
    temperature: Optional[float]
    weather_symbol: int
    wind_speed: Optional[float] = None
    humidity: Optional[float] = None
    cloud_cover: Optional[float] = None


@dataclass(frozen=True)
class ActivitySuggestion:
    """Something to do in the given weather."""

    emoji: str
    activity: str
    description: str


@dataclass(frozen=True)
class StationObservation:
    """Latest observation snapshot for a weather station."""

    station_id: str
    station_name: str
    timestamp: Optional[str]
    values: Mapping[str, Optional[float]] = field(default_factory=dict)
    error: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "values", _frozen_values(self.values))
