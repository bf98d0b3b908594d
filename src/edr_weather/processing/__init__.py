"""
Data processing module for the EDR weather client.

Provides coverage decoding, series/grid building and daily aggregation.
"""

import logging
from typing import Any, List, Optional, Sequence

from ..core import constants
from ..models import TimeSeriesPoint, GridPoint, DailyAggregate
from .decoder import CoverageDecoder
from .builder import SeriesBuilder
from .aggregator import DailyAggregator
from .colors import color_for, interpolate_color, COLOR_SCALES
from .symbols import weather_symbol_from_cloud_cover, describe_weather_symbol, activity_suggestion


class CoverageProcessor:
    """
    Unified processor combining decoding, building and aggregation.

    This class provides a convenient interface to all processing operations.
    """

    def __init__(
        self,
        timezone: str = constants.DEFAULT_DISPLAY_TIMEZONE,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize coverage processor.

        Args:
            timezone: Display timezone for labels
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.decoder = CoverageDecoder(logger)
        self.builder = SeriesBuilder(self.decoder, timezone=timezone, logger=logger)
        self.aggregator = DailyAggregator(logger)

    def decode_series(self, response: Any, parameter_names: Sequence[str]) -> List[TimeSeriesPoint]:
        """Decode a point response into time series points."""
        return self.decoder.decode_series(response, parameter_names)

    def decode_grid(self, response: Any, parameter_name: str, time_index: int = 0) -> List[GridPoint]:
        """Decode an area response into grid points."""
        return self.decoder.decode_grid(response, parameter_name, time_index)

    def build_series(self, response: Any, parameter_names: Sequence[str]) -> List[TimeSeriesPoint]:
        """Decode and label a point response."""
        return self.builder.build_series(response, parameter_names)

    def build_grid(
        self,
        response: Any,
        parameter_name: str,
        time_index: int = 0,
        scale: str = "temperature"
    ) -> List[GridPoint]:
        """Decode and color an area response."""
        return self.builder.build_grid(response, parameter_name, time_index, scale)

    def aggregate_by_day(
        self,
        points: Sequence[TimeSeriesPoint],
        field: str,
        category_field: Optional[str] = None
    ) -> List[DailyAggregate]:
        """Reduce points to UTC daily aggregates."""
        return self.aggregator.aggregate_by_day(points, field, category_field)


__all__ = [
    "CoverageDecoder",
    "SeriesBuilder",
    "DailyAggregator",
    "CoverageProcessor",
    "color_for",
    "interpolate_color",
    "COLOR_SCALES",
    "weather_symbol_from_cloud_cover",
    "describe_weather_symbol",
    "activity_suggestion",
]
