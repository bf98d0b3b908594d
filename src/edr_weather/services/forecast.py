"""
Forecast service.

Composes fetcher, decoder, builder and aggregator for each weather view, with
matching demo-data generators for use with `with_fallback`.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple, TYPE_CHECKING

from ..api.helpers import bounds_to_polygon
from ..core import constants
from ..core.date_utils import DateUtils
from ..models import (
    City,
    CurrentConditions,
    DailyAggregate,
    GridPoint,
    StationObservation,
    TimeSeriesPoint,
    WeatherStation,
)
from ..processing import CoverageProcessor, weather_symbol_from_cloud_cover
from .fallback import FallbackSynthesizer, ShapeHint, grid_axes
from .fetcher import CoverageFetcher

if TYPE_CHECKING:
    from ..api import EdrAPI
    from ..core.config import Config


class ForecastService:
    """High-level weather queries for the views."""

    def __init__(
        self,
        api_client: "EdrAPI",
        config: Optional["Config"] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize forecast service.

        Args:
            api_client: EDR API client
            config: Configuration object (defaults used when None)
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.config = config
        timezone = config.display_timezone if config else constants.DEFAULT_DISPLAY_TIMEZONE
        self.fetcher = CoverageFetcher(api_client, config, self.logger)
        self.processor = CoverageProcessor(timezone=timezone, logger=self.logger)
        self.synthesizer = FallbackSynthesizer(self.logger)
        self.date_utils = DateUtils(self.logger)

    @property
    def forecast_days(self) -> int:
        return self.config.forecast_days if self.config else constants.DEFAULT_FORECAST_DAYS

    def current_conditions(
        self,
        latitude: float,
        longitude: float,
        timeout_ms: Optional[int] = None,
        reference_time: Optional[datetime] = None
    ) -> CurrentConditions:
        """
        Current weather: the first forecast step of the next hour.

        The weather symbol is derived from total cloud cover.

        Raises:
            FetchError: On request failure
            MalformedResponseError: If the response cannot be decoded
        """
        start, end = self.date_utils.hours_ahead(1, reference_time)
        response = self.fetcher.fetch_position(
            latitude,
            longitude,
            constants.CURRENT_WEATHER_PARAMETERS,
            DateUtils.format_datetime_range(start, end),
            timeout_ms=timeout_ms
        )
        timestamp, values = self.processor.decoder.decode_snapshot(
            response, constants.CURRENT_WEATHER_PARAMETERS
        )
        return self._conditions_from_values(timestamp, values)

    @staticmethod
    def _conditions_from_values(timestamp: Optional[str], values: Dict[str, Optional[float]]) -> CurrentConditions:
        cloud_cover = values.get("totalcloudcover")
        return CurrentConditions(
            timestamp=timestamp or "",
            temperature=values.get("temperature"),
            weather_symbol=weather_symbol_from_cloud_cover(cloud_cover),
            wind_speed=values.get("windspeedms"),
            humidity=values.get("humidity"),
            cloud_cover=cloud_cover,
        )

    def demo_current_conditions(self) -> CurrentConditions:
        """Synthetic counterpart of current_conditions."""
        points = self.synthesizer.synthesize(
            ShapeHint(time_steps=1, parameters=tuple(constants.CURRENT_WEATHER_PARAMETERS))
        )
        return self._conditions_from_values(points[0].time, dict(points[0].values))

    def hourly_forecast(
        self,
        latitude: float,
        longitude: float,
        hours: int = 12,
        parameters: Sequence[str] = tuple(constants.HOURLY_FORECAST_PARAMETERS),
        reference_time: Optional[datetime] = None
    ) -> List[TimeSeriesPoint]:
        """
        Hourly forecast series with local time labels.

        Raises:
            FetchError: On request failure
            MalformedResponseError: If the response cannot be decoded
        """
        start, end = self.date_utils.hours_ahead(hours, reference_time)
        response = self.fetcher.fetch_position(
            latitude, longitude, parameters, DateUtils.format_datetime_range(start, end)
        )
        return self.processor.build_series(response, parameters)

    def demo_hourly_forecast(
        self,
        hours: int = 12,
        parameters: Sequence[str] = tuple(constants.HOURLY_FORECAST_PARAMETERS)
    ) -> List[TimeSeriesPoint]:
        """Synthetic counterpart of hourly_forecast."""
        points = self.synthesizer.synthesize(ShapeHint(time_steps=hours, parameters=tuple(parameters)))
        return self.processor.builder.attach_labels(points)

    def daily_forecast(
        self,
        latitude: float,
        longitude: float,
        days: Optional[int] = None,
        reference_time: Optional[datetime] = None
    ) -> List[DailyAggregate]:
        """
        Daily temperature summary with the day's most common weather symbol.

        Fetches one extra day so the last shown day is complete, then keeps
        the first `days` days.

        Raises:
            FetchError: On request failure
            MalformedResponseError: If the response cannot be decoded
        """
        if days is None:
            days = self.forecast_days
        start, end = self.date_utils.days_from_midnight(days + 1, reference_time)
        response = self.fetcher.fetch_position(
            latitude,
            longitude,
            constants.DAILY_FORECAST_PARAMETERS,
            DateUtils.format_datetime_range(start, end)
        )
        points = self.processor.decode_series(response, constants.DAILY_FORECAST_PARAMETERS)
        aggregates = self.processor.aggregate_by_day(points, "temperature", "weathersymbol3")
        return aggregates[:days]

    def demo_daily_forecast(self, days: Optional[int] = None) -> List[DailyAggregate]:
        """Synthetic counterpart of daily_forecast."""
        if days is None:
            days = self.forecast_days
        points = self.synthesizer.synthesize(
            ShapeHint(time_steps=24 * days, parameters=tuple(constants.DAILY_FORECAST_PARAMETERS))
        )
        return self.processor.aggregate_by_day(points, "temperature", "weathersymbol3")[:days]

    def daily_average_temperature(
        self,
        cities: Sequence[City],
        date_str: str
    ) -> Dict[str, float]:
        """
        Average temperature over one UTC day for each city.

        All cities are fetched concurrently; one failure fails the batch.

        Args:
            cities: Cities to query
            date_str: Date in YYYY-MM-DD format

        Returns:
            Mapping of city name to mean temperature

        Raises:
            FetchError: If any city's request fails
            MalformedResponseError: If any city has no valid temperatures
        """
        start, end = self.date_utils.get_utc_day_range(date_str)
        datetime_value = f"{start}/{end}"

        jobs = {
            city.name: (lambda c=city: self.fetcher.fetch_position(
                c.latitude, c.longitude, ["Temperature"], datetime_value
            ))
            for city in cities
        }
        responses = self.fetcher.fetch_many(jobs)

        averages = {}
        for name, response in responses.items():
            points = self.processor.decode_series(response, ["Temperature"])
            averages[name] = self.processor.aggregator.daily_mean(points, "temperature")
        return averages

    def demo_daily_average_temperature(self, cities: Sequence[City]) -> Dict[str, float]:
        """Synthetic counterpart of daily_average_temperature."""
        averages = {}
        for seed, city in enumerate(cities):
            points = self.synthesizer.synthesize(ShapeHint(time_steps=24, seed=seed))
            averages[city.name] = self.processor.aggregator.daily_mean(points, "temperature")
        return averages

    def area_grid(
        self,
        parameter: str = "Temperature",
        polygon: Optional[str] = None,
        datetime_value: str = "",
        time_index: int = 0,
        scale: str = "temperature"
    ) -> List[GridPoint]:
        """
        Colored grid for an area (Scandinavia by default).

        Raises:
            FetchError: On request failure
            MalformedResponseError: If the response cannot be decoded
        """
        polygon = polygon or bounds_to_polygon(constants.SCANDINAVIA_BOUNDS)
        response = self.fetcher.fetch_area(polygon, [parameter], datetime_value)
        return self.processor.build_grid(response, parameter, time_index, scale)

    def demo_area_grid(
        self,
        parameter: str = "Temperature",
        bounds: Tuple[float, float, float, float] = constants.SCANDINAVIA_BOUNDS,
        columns: int = 14,
        rows: int = 9,
        scale: str = "temperature"
    ) -> List[GridPoint]:
        """Synthetic counterpart of area_grid."""
        xs, ys = grid_axes(bounds, columns, rows)
        hint = ShapeHint(time_steps=1, parameters=(parameter,), x_values=xs, y_values=ys)
        points = self.synthesizer.synthesize_grid(hint, parameter)
        return self.processor.builder.color_grid(points, scale)

    def station_observations(
        self,
        stations: Sequence[WeatherStation],
        datetime_value: Optional[str] = None
    ) -> List[StationObservation]:
        """
        Latest observations for each station.

        A failing station is reported with its error; the others are kept.

        Args:
            stations: Stations to query
            datetime_value: ISO instant (defaults to the current UTC hour)
        """
        if datetime_value is None:
            now = datetime.now(DateUtils.parse_timezone("UTC"))
            datetime_value = DateUtils.to_iso_utc(now.replace(minute=0, second=0, microsecond=0))

        parameters = constants.STATION_OBSERVATION_PARAMETERS
        jobs = {
            station.fmisid: (lambda s=station: self.processor.decoder.decode_snapshot(
                self.fetcher.fetch_station(s.fmisid, parameters, datetime_value), parameters
            ))
            for station in stations
        }
        outcomes = self.fetcher.fetch_many_settled(jobs)

        observations = []
        for station in stations:
            result, error = outcomes[station.fmisid]
            if error is not None:
                observations.append(StationObservation(
                    station_id=station.fmisid,
                    station_name=station.name,
                    timestamp=datetime_value,
                    error=str(error) or "Failed to fetch data",
                ))
                continue
            timestamp, values = result
            observations.append(StationObservation(
                station_id=station.fmisid,
                station_name=station.name,
                timestamp=timestamp,
                values=values,
            ))
        return observations

    def pressure_trend(
        self,
        stations: Sequence[WeatherStation],
        hours: int = 24,
        reference_time: Optional[datetime] = None
    ) -> List[Dict[str, Optional[float]]]:
        """
        Forecast pressure for several stations merged into one table by time.

        One failure fails the batch.

        Returns:
            Rows {"time": ..., <station name>: pressure, ...}
        """
        start, end = self.date_utils.hours_ahead(hours, reference_time)
        datetime_value = DateUtils.format_datetime_range(start, end)

        jobs = {
            station.name: (lambda s=station: self.fetcher.fetch_position(
                s.latitude, s.longitude, ["Pressure"], datetime_value
            ))
            for station in stations
        }
        responses = self.fetcher.fetch_many(jobs)

        series = {
            name: self.processor.decode_series(response, ["Pressure"])
            for name, response in responses.items()
        }
        return self.processor.builder.merge_by_time(series, "pressure")

    def demo_pressure_trend(self, stations: Sequence[WeatherStation], hours: int = 24) -> List[Dict[str, Optional[float]]]:
        """Synthetic counterpart of pressure_trend."""
        series = {
            station.name: self.synthesizer.synthesize(
                ShapeHint(time_steps=hours, parameters=("Pressure",), seed=seed)
            )
            for seed, station in enumerate(stations)
        }
        return self.processor.builder.merge_by_time(series, "pressure")
