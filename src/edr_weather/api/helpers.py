"""
Helper functions for API operations.

Provides well-known-text geometry formatting and query string building.
"""

from datetime import datetime
from typing import Dict, Any, Iterable, Sequence, Tuple
from urllib.parse import urlencode, quote

from ..core import constants
from ..core.date_utils import DateUtils


def format_point(latitude: float, longitude: float, decimals: int = constants.COORDINATE_DECIMALS) -> str:
    """
    Format coordinates as a WKT point for the EDR API.

    Note: WKT uses lon lat order.

    Example:
        format_point(60.1699, 24.9384) -> 'POINT(24.9384 60.1699)'
    """
    return f"POINT({longitude:.{decimals}f} {latitude:.{decimals}f})"


def format_polygon(vertices: Sequence[Tuple[float, float]]) -> str:
    """
    Format (lon, lat) vertices as a WKT polygon, closing the ring if needed.

    Raises:
        ValueError: If fewer than three distinct vertices are given
    """
    ring = list(vertices)
    if ring and ring[0] != ring[-1]:
        ring.append(ring[0])
    if len(ring) < 4:
        raise ValueError(f"Polygon needs at least 3 vertices, got {len(vertices)}")
    coords = ", ".join(f"{_trim(lon)} {_trim(lat)}" for lon, lat in ring)
    return f"POLYGON(({coords}))"


def bounds_to_polygon(bounds: Tuple[float, float, float, float]) -> str:
    """
    Convert (min_lon, min_lat, max_lon, max_lat) to a WKT polygon.

    Example:
        bounds_to_polygon((5, 55, 31, 71)) -> 'POLYGON((5 55, 31 55, 31 71, 5 71, 5 55))'
    """
    min_lon, min_lat, max_lon, max_lat = bounds
    return format_polygon([
        (min_lon, min_lat),
        (max_lon, min_lat),
        (max_lon, max_lat),
        (min_lon, max_lat),
    ])


def _trim(value: float) -> str:
    """Render a coordinate without a trailing '.0'."""
    return f"{value:g}" if float(value).is_integer() else repr(float(value))


def join_parameter_names(names: Iterable[str]) -> str:
    """Comma-join parameter names for the 'parameter-name' option."""
    return ",".join(name.strip() for name in names if name and name.strip())


def format_datetime_range(start: datetime, end: datetime) -> str:
    """Format an EDR 'datetime' interval."""
    return DateUtils.format_datetime_range(start, end)


def build_query_options(
    parameter_names: Iterable[str],
    datetime_value: str = "",
    output_format: str = constants.DEFAULT_FORMAT
) -> Dict[str, str]:
    """
    Build the common query options of a data query.

    Returns:
        Dictionary with 'f', 'parameter-name' and (when given) 'datetime'
    """
    options = {
        "f": output_format,
        "parameter-name": join_parameter_names(parameter_names),
    }
    if datetime_value:
        options["datetime"] = datetime_value
    return options


def build_endpoint(path: str, params: Dict[str, Any]) -> str:
    """
    Append URL-encoded query parameters to an endpoint path.

    Spaces are encoded as %20 and commas/slashes kept readable.
    """
    if not params:
        return path
    query_string = urlencode(params, quote_via=quote, safe=",/:")
    return f"{path}?{query_string}"
