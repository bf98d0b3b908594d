"""
Coverage fetcher for EDR queries.

Builds position, area and station queries and fans out multi-location requests.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, TYPE_CHECKING

from ..api.helpers import build_query_options, format_point
from ..core import constants

if TYPE_CHECKING:
    from ..api import EdrAPI
    from ..core.config import Config


class CoverageFetcher:
    """Fetch raw CoverageJSON responses for the views."""

    def __init__(
        self,
        api_client: "EdrAPI",
        config: Optional["Config"] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize coverage fetcher.

        Args:
            api_client: EDR API client
            config: Configuration object (defaults used when None)
            logger: Logger instance
        """
        self.api = api_client
        self.config = config
        self.logger = logger or logging.getLogger(__name__)

    @property
    def forecast_collection(self) -> str:
        if self.config is None:
            return constants.DEFAULT_COLLECTION
        return self.config.default_collection

    @property
    def observation_collection(self) -> str:
        if self.config is None:
            return constants.OBSERVATION_COLLECTION
        return self.config.observation_collection

    @property
    def workers(self) -> int:
        if self.config is None:
            return constants.DEFAULT_FETCH_WORKERS
        return self.config.fetch_workers

    def fetch_position(
        self,
        latitude: float,
        longitude: float,
        parameter_names: Sequence[str],
        datetime_value: str = "",
        collection_id: Optional[str] = None,
        timeout_ms: Optional[int] = None
    ) -> Any:
        """
        Fetch a point query for one location.

        Args:
            latitude: Latitude
            longitude: Longitude
            parameter_names: Parameters to request
            datetime_value: ISO instant or 'start/end' interval
            collection_id: Collection (defaults to the forecast collection)
            timeout_ms: Per-call timeout in milliseconds

        Raises:
            FetchError: On request failure
        """
        return self.api.get_position_data(
            collection_id or self.forecast_collection,
            format_point(latitude, longitude),
            build_query_options(parameter_names, datetime_value),
            timeout_ms=timeout_ms
        )

    def fetch_area(
        self,
        polygon: str,
        parameter_names: Sequence[str],
        datetime_value: str = "",
        collection_id: Optional[str] = None,
        timeout_ms: Optional[int] = None
    ) -> Any:
        """
        Fetch an area query for a WKT polygon.

        Raises:
            FetchError: On request failure
        """
        return self.api.get_area_data(
            collection_id or self.forecast_collection,
            polygon,
            build_query_options(parameter_names, datetime_value),
            timeout_ms=timeout_ms
        )

    def fetch_station(
        self,
        fmisid: str,
        parameter_names: Sequence[str],
        datetime_value: str = "",
        timeout_ms: Optional[int] = None
    ) -> Any:
        """
        Fetch observations for an FMI station.

        Raises:
            FetchError: On request failure
        """
        return self.api.get_location_data(
            self.observation_collection,
            fmisid,
            build_query_options(parameter_names, datetime_value),
            timeout_ms=timeout_ms
        )

    def _run_all(self, jobs: Dict[str, Callable[[], Any]]) -> Dict[str, Any]:
        """Run jobs concurrently and wait for every one to settle."""
        if not jobs:
            return {}
        with ThreadPoolExecutor(max_workers=min(self.workers, len(jobs))) as executor:
            futures = {key: executor.submit(job) for key, job in jobs.items()}
            wait(list(futures.values()))
        return futures

    def fetch_many(self, jobs: Dict[str, Callable[[], Any]]) -> Dict[str, Any]:
        """
        Run fetch jobs concurrently, all-or-nothing.

        Every job is allowed to settle; if any failed, the first failure
        (in job order) is raised and no partial results are returned.

        Args:
            jobs: Mapping of caller key to zero-argument fetch callable

        Returns:
            Mapping of key to result
        """
        self.logger.info(f"Fetching {len(jobs)} locations concurrently")
        futures = self._run_all(jobs)

        for key, future in futures.items():
            error = future.exception()
            if error is not None:
                self.logger.error(f"Batch fetch failed at '{key}': {error}")
                raise error

        return {key: future.result() for key, future in futures.items()}

    def fetch_many_settled(
        self,
        jobs: Dict[str, Callable[[], Any]]
    ) -> Dict[str, Tuple[Any, Optional[BaseException]]]:
        """
        Run fetch jobs concurrently and report each outcome separately.

        Returns:
            Mapping of key to (result, None) or (None, error)
        """
        self.logger.info(f"Fetching {len(jobs)} locations concurrently (settled)")
        futures = self._run_all(jobs)

        outcomes: Dict[str, Tuple[Any, Optional[BaseException]]] = {}
        for key, future in futures.items():
            error = future.exception()
            if error is not None:
                self.logger.warning(f"Fetch for '{key}' failed: {error}")
                outcomes[key] = (None, error)
            else:
                outcomes[key] = (future.result(), None)
        return outcomes
