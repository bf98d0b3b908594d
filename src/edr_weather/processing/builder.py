"""
Series and grid builder.

Turns decoded records into display-ready structures: local time labels,
grid colors and multi-location tables.
"""

import dataclasses
import logging
from typing import Dict, Any, List, Mapping, Optional, Sequence

from ..core import constants
from ..core.date_utils import DateUtils
from ..models import TimeSeriesPoint, GridPoint
from .colors import color_for
from .decoder import CoverageDecoder


class SeriesBuilder:
    """Build display-ready series and grids from coverage responses."""

    def __init__(
        self,
        decoder: Optional[CoverageDecoder] = None,
        timezone: str = constants.DEFAULT_DISPLAY_TIMEZONE,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize series builder.

        Args:
            decoder: Coverage decoder (created if not given)
            timezone: Display timezone for labels
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.decoder = decoder or CoverageDecoder(self.logger)
        self.date_utils = DateUtils(self.logger)
        self.timezone = timezone
        # fail early on a bad timezone
        self.date_utils.parse_timezone(timezone)

    def attach_labels(
        self,
        points: Sequence[TimeSeriesPoint],
        label_format: str = "%H:%M"
    ) -> List[TimeSeriesPoint]:
        """Return copies of the points with local time labels."""
        return [
            dataclasses.replace(
                point,
                label=self.date_utils.format_local_label(point.time, self.timezone, label_format)
            )
            for point in points
        ]

    def build_series(
        self,
        response: Any,
        parameter_names: Sequence[str],
        label_format: str = "%H:%M"
    ) -> List[TimeSeriesPoint]:
        """
        Decode a point response and attach local time labels.

        Raises:
            MalformedResponseError: Passed through from the decoder
        """
        points = self.decoder.decode_series(response, parameter_names)
        return self.attach_labels(points, label_format)

    @staticmethod
    def color_grid(points: Sequence[GridPoint], scale: str = "temperature") -> List[GridPoint]:
        """Return copies of the grid points colored on the named scale."""
        return [
            dataclasses.replace(point, presentation_color=color_for(point.value, scale))
            for point in points
        ]

    def build_grid(
        self,
        response: Any,
        parameter_name: str,
        time_index: int = 0,
        scale: str = "temperature"
    ) -> List[GridPoint]:
        """
        Decode an area response and color each cell.

        Raises:
            MalformedResponseError: Passed through from the decoder
        """
        points = self.decoder.decode_grid(response, parameter_name, time_index)
        return self.color_grid(points, scale)

    @staticmethod
    def merge_by_time(
        series_by_key: Mapping[str, Sequence[TimeSeriesPoint]],
        field: str
    ) -> List[Dict[str, Any]]:
        """
        Merge several series into one table keyed by timestamp.

        Example:
            {"Harmaja": [...], "Kotka": [...]} ->
            [{"time": "...", "Harmaja": 1012.3, "Kotka": None}, ...]

        Returns:
            Rows sorted by timestamp; a key with no sample at a time gets None
        """
        field = field.lower()
        rows: Dict[str, Dict[str, Any]] = {}
        order: Dict[str, int] = {}

        for key, points in series_by_key.items():
            for point in points:
                if point.time not in rows:
                    rows[point.time] = {"time": point.time}
                    order[point.time] = point.timestamp_millis
                rows[point.time][key] = point.get(field)

        for row in rows.values():
            for key in series_by_key:
                row.setdefault(key, None)

        return [rows[t] for t in sorted(rows, key=lambda t: order[t])]
