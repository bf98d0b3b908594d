"""
Coverage decoding module.

Extracts time axes, spatial axes and parameter value arrays from CoverageJSON
responses and validates them against each other.
"""

import logging
import math
from typing import Dict, Any, List, Optional, Sequence, Tuple

from ..core.date_utils import DateUtils
from ..core.exceptions import MalformedResponseError
from ..core.logger import warn_partial
from ..models import TimeSeriesPoint, GridPoint


class CoverageDecoder:
    """Decode CoverageJSON responses into time series points and grid points."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize coverage decoder.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def resolve_key(mapping: Any, name: str) -> Optional[str]:
        """
        Resolve a parameter key case-insensitively.

        Tries the exact name, then the all-lowercase name, then any key equal
        to the name ignoring case.

        Returns:
            The key present in the mapping, or None
        """
        if not isinstance(mapping, dict):
            return None
        if name in mapping:
            return name
        lower = name.lower()
        if lower in mapping:
            return lower
        for key in mapping:
            if isinstance(key, str) and key.lower() == lower:
                return key
        return None

    @staticmethod
    def normalize_value(value: Any) -> Optional[float]:
        """Normalize a raw range value: None, NaN and non-numbers become None."""
        if value is None or isinstance(value, bool):
            return None
        if not isinstance(value, (int, float)):
            return None
        if isinstance(value, float) and math.isnan(value):
            return None
        return float(value)

    @staticmethod
    def _axes(response: Any) -> Dict[str, Any]:
        if not isinstance(response, dict):
            raise MalformedResponseError(
                f"Coverage response must be an object, got {type(response).__name__}"
            )
        domain = response.get("domain")
        axes = domain.get("axes") if isinstance(domain, dict) else None
        return axes if isinstance(axes, dict) else {}

    @staticmethod
    def _axis_values(axes: Dict[str, Any], name: str) -> Optional[List[Any]]:
        axis = axes.get(name)
        values = axis.get("values") if isinstance(axis, dict) else None
        return values if isinstance(values, list) else None

    def time_axis(self, response: Any) -> List[str]:
        """
        Get the time axis values.

        Raises:
            MalformedResponseError: If domain.axes.t.values is absent or not a list
        """
        times = self._axis_values(self._axes(response), "t")
        if times is None:
            raise MalformedResponseError("Response has no time axis (domain.axes.t.values)")
        return times

    def _range_values(self, response: Dict[str, Any], name: str) -> Optional[List[Any]]:
        """
        Get the raw value array of a parameter, or None if the parameter is absent.

        Raises:
            MalformedResponseError: If the range exists but has no values list
        """
        ranges = response.get("ranges")
        key = self.resolve_key(ranges, name)
        if key is None:
            return None
        values = ranges[key].get("values") if isinstance(ranges[key], dict) else None
        if not isinstance(values, list):
            raise MalformedResponseError(f"Range '{key}' has no values array")
        return values

    def decode_series(
        self,
        response: Any,
        parameter_names: Sequence[str]
    ) -> List[TimeSeriesPoint]:
        """
        Decode a point/time query into index-aligned time series points.

        Field names in the output are the requested names lowercased. A parameter
        missing from the response is None at every index.

        Args:
            response: Parsed CoverageJSON body
            parameter_names: Requested parameter names (any casing)

        Returns:
            One TimeSeriesPoint per time step, in source order

        Raises:
            MalformedResponseError: Missing time axis, unparseable timestamp,
                or a value array whose length differs from the time axis
        """
        times = self.time_axis(response)
        columns: Dict[str, Optional[List[Any]]] = {}

        for name in parameter_names:
            field_name = name.lower()
            values = self._range_values(response, name)
            if values is None:
                warn_partial(self.logger, f"Parameter '{name}' not present in response; filling with nulls")
            elif len(values) != len(times):
                raise MalformedResponseError(
                    f"Parameter '{name}' has {len(values)} values for {len(times)} time steps"
                )
            columns[field_name] = values

        points = []
        for index, timestamp in enumerate(times):
            if not isinstance(timestamp, str):
                raise MalformedResponseError(f"Time value at index {index} is not a string: {timestamp!r}")
            try:
                millis = DateUtils.to_epoch_millis(timestamp)
            except ValueError as e:
                raise MalformedResponseError(f"Invalid timestamp at index {index}: {timestamp}") from e

            values = {
                field_name: (self.normalize_value(column[index]) if column is not None else None)
                for field_name, column in columns.items()
            }
            points.append(TimeSeriesPoint(time=timestamp, timestamp_millis=millis, values=values))

        self.logger.debug(f"Decoded {len(points)} time steps for {list(columns)}")
        return points

    def decode_snapshot(
        self,
        response: Any,
        parameter_names: Sequence[str],
        index: int = 0
    ) -> Tuple[Optional[str], Dict[str, Optional[float]]]:
        """
        Decode the values of a single time step (the first one by default).

        Returns:
            Tuple of (timestamp, values); (None, all-None values) when the time axis is empty
        """
        points = self.decode_series(response, parameter_names)
        if not points:
            warn_partial(self.logger, "Response has an empty time axis")
            return None, {name.lower(): None for name in parameter_names}
        if not -len(points) <= index < len(points):
            raise MalformedResponseError(f"Time index {index} out of range for {len(points)} steps")
        point = points[index]
        return point.time, dict(point.values)

    def decode_grid(
        self,
        response: Any,
        parameter_name: str,
        time_index: int = 0
    ) -> List[GridPoint]:
        """
        Decode an area query into grid points for one time step.

        The value array is addressed as t*(|y|*|x|) + y*|x| + x. Cells beyond the
        end of a truncated array get None. A CoverageCollection ('coverages')
        is decoded member by member and concatenated.

        Args:
            response: Parsed CoverageJSON body
            parameter_name: Requested parameter (any casing)
            time_index: Time step to extract

        Returns:
            |x|*|y| grid points per coverage, row-major (y outer, x inner)

        Raises:
            MalformedResponseError: Missing x/y axes or time_index out of range
        """
        if isinstance(response, dict) and "coverages" in response:
            coverages = response.get("coverages")
            if not isinstance(coverages, list) or not coverages:
                raise MalformedResponseError("Coverage collection has no coverages")
            points: List[GridPoint] = []
            for coverage in coverages:
                points.extend(self._decode_single_grid(coverage, parameter_name, time_index))
            return points

        return self._decode_single_grid(response, parameter_name, time_index)

    def _decode_single_grid(
        self,
        response: Any,
        parameter_name: str,
        time_index: int
    ) -> List[GridPoint]:
        axes = self._axes(response)
        xs = self._axis_values(axes, "x")
        ys = self._axis_values(axes, "y")
        if xs is None or ys is None:
            raise MalformedResponseError("Area response needs x and y axes")

        times = self._axis_values(axes, "t")
        n_t = len(times) if times else 1
        if not 0 <= time_index < n_t:
            raise MalformedResponseError(f"Time index {time_index} out of range for {n_t} steps")

        values = self._range_values(response, parameter_name)
        if values is None:
            warn_partial(self.logger, f"Parameter '{parameter_name}' not present in area response")
            values = []

        n_x, n_y = len(xs), len(ys)
        expected = n_t * n_y * n_x
        if len(values) != expected:
            warn_partial(
                self.logger,
                f"Grid for '{parameter_name}' has {len(values)} values, expected {expected} "
                f"(t={n_t}, y={n_y}, x={n_x})"
            )

        offset = time_index * n_y * n_x
        points = []
        for y_idx, latitude in enumerate(ys):
            for x_idx, longitude in enumerate(xs):
                index = offset + y_idx * n_x + x_idx
                raw = values[index] if index < len(values) else None
                points.append(GridPoint(
                    longitude=longitude,
                    latitude=latitude,
                    value=self.normalize_value(raw)
                ))

        self.logger.debug(f"Decoded {len(points)} grid cells for '{parameter_name}' at t={time_index}")
        return points

    def parameter_units(self, response: Any) -> Dict[str, str]:
        """
        Extract unit symbols from the 'parameters' metadata.

        The symbol may be a plain string or an object with a 'value'.

        Returns:
            Dictionary mapping parameter key to unit symbol
        """
        parameters = response.get("parameters") if isinstance(response, dict) else None
        units: Dict[str, str] = {}
        if not isinstance(parameters, dict):
            return units

        for key, meta in parameters.items():
            unit = meta.get("unit") if isinstance(meta, dict) else None
            symbol = unit.get("symbol") if isinstance(unit, dict) else None
            if isinstance(symbol, dict):
                symbol = symbol.get("value")
            if isinstance(symbol, str):
                units[key] = symbol
        return units
