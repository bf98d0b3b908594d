"""
Data query operations for the EDR API.

Handles position, area and location queries returning CoverageJSON.
"""

import logging
from typing import Dict, Any, Optional

from .helpers import build_endpoint


class QueriesAPI:
    """Mixin for EDR data queries."""

    # Type hints for attributes provided by APIClient base class
    logger: logging.Logger

    def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        timeout_ms: Optional[int] = None
    ) -> Any:
        """Method provided by APIClient base class."""
        ...

    def fetch_coverage(
        self,
        endpoint_path: str,
        query_params: Optional[Dict[str, Any]] = None,
        timeout_ms: Optional[int] = None
    ) -> Any:
        """
        GET an EDR endpoint and return the parsed JSON body.

        No structural validation is done here; that is the decoder's job.

        Args:
            endpoint_path: Path below the base URL, e.g. '/collections/x/position'
            query_params: Query options, URL-encoded into the request
            timeout_ms: Per-call timeout in milliseconds

        Returns:
            Parsed JSON body

        Raises:
            FetchError: On non-2xx status, network failure or timeout
        """
        endpoint = build_endpoint(endpoint_path, dict(query_params or {}))
        return self.get(endpoint, params=None, timeout_ms=timeout_ms)

    def get_position_data(
        self,
        collection_id: str,
        coords: str,
        params: Optional[Dict[str, str]] = None,
        timeout_ms: Optional[int] = None
    ) -> Any:
        """
        Fetch data from a position query.

        Args:
            collection_id: Collection ID
            coords: Coordinates in format "POINT(lon lat)"
            params: Additional query options (f, parameter-name, datetime)
            timeout_ms: Per-call timeout in milliseconds

        Example:
            data = api.get_position_data(
                "pal_skandinavia",
                "POINT(24.9384 60.1699)",
                {"f": "CoverageJSON", "parameter-name": "Temperature"}
            )
        """
        self.logger.debug(f"Position query on {collection_id} at {coords}")
        query = {"coords": coords}
        query.update(params or {})
        return self.fetch_coverage(
            f"/collections/{collection_id}/position", query, timeout_ms=timeout_ms
        )

    def get_area_data(
        self,
        collection_id: str,
        coords: str,
        params: Optional[Dict[str, str]] = None,
        timeout_ms: Optional[int] = None
    ) -> Any:
        """
        Fetch data from an area query.

        Args:
            collection_id: Collection ID
            coords: Polygon in WKT format, e.g. "POLYGON((lon1 lat1, lon2 lat2, ...))"
            params: Additional query options
            timeout_ms: Per-call timeout in milliseconds
        """
        self.logger.debug(f"Area query on {collection_id} for {coords}")
        query = {"coords": coords}
        query.update(params or {})
        return self.fetch_coverage(
            f"/collections/{collection_id}/area", query, timeout_ms=timeout_ms
        )

    def get_location_data(
        self,
        collection_id: str,
        location_id: str,
        params: Optional[Dict[str, str]] = None,
        timeout_ms: Optional[int] = None
    ) -> Any:
        """
        Fetch data for a named location, e.g. an FMI station (fmisid).

        Args:
            collection_id: Collection ID (observations live in 'opendata')
            location_id: Location identifier
            params: Additional query options
            timeout_ms: Per-call timeout in milliseconds
        """
        self.logger.debug(f"Location query on {collection_id} for {location_id}")
        return self.fetch_coverage(
            f"/collections/{collection_id}/locations/{location_id}",
            params,
            timeout_ms=timeout_ms
        )
