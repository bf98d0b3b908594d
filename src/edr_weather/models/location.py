"""
Location data models.

Contains DTOs for cities, weather stations and EDR collections.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any, List


@dataclass(frozen=True)
class City:
    """City with coordinates for point queries."""

    name: str
    country: str
    longitude: float
    latitude: float


@dataclass(frozen=True)
class WeatherStation:
    """FMI observation station."""

    fmisid: str
    name: str
    longitude: float
    latitude: float


@dataclass
class Collection:
    """EDR collection metadata."""

    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    extent: Optional[Dict[str, Any]] = None
    parameter_names: Optional[Dict[str, Any]] = None
    links: Optional[List[Dict[str, Any]]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Collection":
        """Build from an EDR collection JSON object."""
        return cls(
            id=data.get("id", ""),
            title=data.get("title"),
            description=data.get("description"),
            extent=data.get("extent"),
            parameter_names=data.get("parameter_names"),
            links=data.get("links"),
        )

    @property
    def bbox(self) -> Optional[List[float]]:
        """First spatial bounding box, if any."""
        spatial = (self.extent or {}).get("spatial") or {}
        boxes = spatial.get("bbox") or []
        return boxes[0] if boxes else None
