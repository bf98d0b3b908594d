"""
Synthetic fallback data.

Produces deterministic, CoverageJSON-shaped demo data with the same shape a
live query would have, and the `with_fallback` combinator that substitutes
it when a fetch or decode fails.
"""

import logging
import math
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from ..core import constants
from ..core.date_utils import DateUtils
from ..core.exceptions import FetchError, MalformedResponseError
from ..models import TimeSeriesPoint, GridPoint
from ..processing.decoder import CoverageDecoder
from ..processing.symbols import weather_symbol_from_cloud_cover


T = TypeVar("T")

# lowercase parameter -> (base, amplitude, unit)
PARAMETER_PROFILES: Dict[str, Tuple[float, float, str]] = {
    "temperature": (5.0, 3.0, "°C"),
    "windspeedms": (4.0, 1.5, "m/s"),
    "winddirection": (225.0, 45.0, "°"),
    "humidity": (80.0, 10.0, "%"),
    "totalcloudcover": (50.0, 40.0, "%"),
    "precipitation1h": (0.3, 0.3, "mm"),
    "pop": (30.0, 20.0, "%"),
    "pressure": (1012.0, 6.0, "hPa"),
    "snowdepth": (10.0, 5.0, "cm"),
    "ta_pt1m_avg": (5.0, 3.0, "°C"),
    "ws_pt10m_avg": (6.0, 2.0, "m/s"),
    "wd_pt10m_avg": (225.0, 45.0, "°"),
    "wg_pt1h_max": (9.0, 3.0, "m/s"),
    "pa_pt1m_avg": (1012.0, 6.0, "hPa"),
}

SYMBOL_PARAMETERS = {"weathersymbol3", "weathersymbol"}
TEMPERATURE_PARAMETERS = {"temperature", "ta_pt1m_avg"}

DIURNAL_PERIOD = 24


@dataclass(frozen=True)
class ShapeHint:
    """Shape of the data a live query would have returned."""

    time_steps: int = 12
    parameters: Tuple[str, ...] = ("Temperature",)
    start: str = constants.SYNTHETIC_START
    step_minutes: int = constants.SYNTHETIC_STEP_MINUTES
    x_values: Optional[Tuple[float, ...]] = None  # longitudes, area queries only
    y_values: Optional[Tuple[float, ...]] = None  # latitudes, area queries only
    seed: int = 0

    @property
    def is_area(self) -> bool:
        return self.x_values is not None and self.y_values is not None


@dataclass(frozen=True)
class FallbackResult(Generic[T]):
    """Result of an operation that may have been replaced with demo data."""

    data: T
    is_synthetic: bool = False
    error: Optional[BaseException] = None

    @property
    def notice(self) -> Optional[str]:
        """User-facing notice for synthetic data."""
        if not self.is_synthetic:
            return None
        if self.error is None:
            return "Showing demo data"
        return f"Showing demo data: live data unavailable ({self.error})"


class FallbackSynthesizer:
    """Generate deterministic demo data shaped like live responses."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize synthesizer.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.decoder = CoverageDecoder(self.logger)

    @staticmethod
    def synthetic_value(parameter: str, index: int, seed: int = 0, latitude: Optional[float] = None) -> float:
        """
        Deterministic value for a parameter at a step index.

        A daily sinusoid around the parameter's base value; the seed shifts the
        phase. Colder towards the north when a latitude is given.
        """
        name = parameter.lower()
        phase = 2 * math.pi * (index + seed) / DIURNAL_PERIOD

        if name in SYMBOL_PARAMETERS:
            base, amplitude, _ = PARAMETER_PROFILES["totalcloudcover"]
            cloud = base + amplitude * math.sin(phase)
            return float(weather_symbol_from_cloud_cover(cloud))

        base, amplitude, _ = PARAMETER_PROFILES.get(name, (0.0, 1.0, ""))
        value = base + amplitude * math.sin(phase)
        if name in TEMPERATURE_PARAMETERS:
            if latitude is not None:
                value -= 0.6 * (latitude - 60.0)
        elif name in PARAMETER_PROFILES:
            value = max(value, 0.0)
        return round(value, 1)

    def _time_values(self, hint: ShapeHint) -> List[str]:
        start = DateUtils.parse_timestamp(hint.start)
        step = timedelta(minutes=hint.step_minutes)
        return [DateUtils.to_iso_utc(start + i * step) for i in range(hint.time_steps)]

    def synthesize_coverage(self, hint: ShapeHint) -> Dict[str, Any]:
        """
        Build a CoverageJSON-shaped response for the hint.

        Point hints get one value per time step; area hints get a flattened
        t, y, x grid of |t|*|y|*|x| values.
        """
        if hint.time_steps < 0:
            raise ValueError(f"time_steps must be >= 0, got {hint.time_steps}")
        if hint.step_minutes <= 0:
            raise ValueError(f"step_minutes must be positive, got {hint.step_minutes}")

        times = self._time_values(hint)
        axes: Dict[str, Any] = {"t": {"values": times}}
        ranges: Dict[str, Any] = {}
        parameters: Dict[str, Any] = {}

        if hint.is_area:
            xs = list(hint.x_values or ())
            ys = list(hint.y_values or ())
            axes["x"] = {"values": xs}
            axes["y"] = {"values": ys}
            for name in hint.parameters:
                ranges[name] = {
                    "values": [
                        self.synthetic_value(name, t + y_idx + x_idx, hint.seed, latitude=lat)
                        for t in range(len(times))
                        for y_idx, lat in enumerate(ys)
                        for x_idx in range(len(xs))
                    ]
                }
        else:
            for name in hint.parameters:
                ranges[name] = {
                    "values": [self.synthetic_value(name, i, hint.seed) for i in range(len(times))]
                }

        for name in hint.parameters:
            unit = PARAMETER_PROFILES.get(name.lower(), (0.0, 0.0, ""))[2]
            parameters[name] = {"unit": {"symbol": unit}}

        return {
            "type": "Coverage",
            "domain": {"type": "Domain", "axes": axes},
            "parameters": parameters,
            "ranges": ranges,
        }

    def synthesize(self, hint: ShapeHint) -> List[TimeSeriesPoint]:
        """
        Synthetic time series with hint.time_steps points.

        Timestamps are strictly increasing from hint.start.
        """
        self.logger.debug(f"Synthesizing {hint.time_steps} steps for {list(hint.parameters)}")
        return self.decoder.decode_series(self.synthesize_coverage(hint), hint.parameters)

    def synthesize_grid(self, hint: ShapeHint, parameter: str, time_index: int = 0) -> List[GridPoint]:
        """
        Synthetic grid for an area hint.

        Raises:
            ValueError: If the hint has no x/y axes
        """
        if not hint.is_area:
            raise ValueError("Grid synthesis needs x_values and y_values")
        if parameter not in hint.parameters:
            hint = ShapeHint(
                time_steps=max(hint.time_steps, 1),
                parameters=tuple(hint.parameters) + (parameter,),
                start=hint.start,
                step_minutes=hint.step_minutes,
                x_values=hint.x_values,
                y_values=hint.y_values,
                seed=hint.seed,
            )
        return self.decoder.decode_grid(self.synthesize_coverage(hint), parameter, time_index)


def grid_axes(bounds: Tuple[float, float, float, float], columns: int, rows: int) -> Tuple[Tuple[float, ...], Tuple[float, ...]]:
    """
    Evenly spaced (x, y) axes covering (min_lon, min_lat, max_lon, max_lat).

    Raises:
        ValueError: If columns or rows is less than 2
    """
    if columns < 2 or rows < 2:
        raise ValueError("A grid needs at least 2 columns and 2 rows")
    min_lon, min_lat, max_lon, max_lat = bounds
    xs = tuple(round(min_lon + i * (max_lon - min_lon) / (columns - 1), 4) for i in range(columns))
    ys = tuple(round(min_lat + j * (max_lat - min_lat) / (rows - 1), 4) for j in range(rows))
    return xs, ys


def with_fallback(
    operation: Callable[[], T],
    synthesizer: Callable[[], T],
    logger: Optional[logging.Logger] = None
) -> FallbackResult[T]:
    """
    Run an operation, substituting synthetic data if it fails to fetch or decode.

    Only FetchError and MalformedResponseError trigger the fallback; other
    errors propagate.

    Args:
        operation: Live operation
        synthesizer: Zero-argument callable producing same-shaped demo data
        logger: Logger instance

    Returns:
        FallbackResult; is_synthetic is True when demo data was substituted
    """
    logger = logger or logging.getLogger(__name__)
    try:
        return FallbackResult(data=operation())
    except (FetchError, MalformedResponseError) as e:
        logger.warning(f"Live data unavailable, using synthetic demo data: {e}")
        return FallbackResult(data=synthesizer(), is_synthetic=True, error=e)
