"""
Test synthetic fallback data.

Demo data must have the shape a live query would have and must be
deterministic, and the fallback combinator must only swallow fetch and
decode failures.
"""

import unittest
from unittest.mock import Mock

from src.edr_weather.core.exceptions import FetchError, MalformedResponseError
from src.edr_weather.services.fallback import (
    FallbackResult,
    FallbackSynthesizer,
    ShapeHint,
    grid_axes,
    with_fallback,
)


class TestFallbackSynthesizer(unittest.TestCase):
    """Test cases for FallbackSynthesizer."""

    def setUp(self):
        """Set up test fixtures."""
        self.synthesizer = FallbackSynthesizer(logger=Mock())

    def test_point_series_shape(self):
        """12 hourly steps with strictly increasing timestamps."""
        points = self.synthesizer.synthesize(ShapeHint(time_steps=12, parameters=("Temperature",)))

        self.assertEqual(len(points), 12)
        self.assertEqual(points[0].time, "2025-01-01T00:00:00Z")
        for previous, current in zip(points, points[1:]):
            self.assertEqual(current.timestamp_millis - previous.timestamp_millis, 3600 * 1000)

    def test_every_value_present(self):
        points = self.synthesizer.synthesize(
            ShapeHint(time_steps=24, parameters=("Temperature", "WindSpeedMS", "WeatherSymbol3"))
        )

        for point in points:
            self.assertEqual(set(point.values), {"temperature", "windspeedms", "weathersymbol3"})
            self.assertTrue(all(v is not None for v in point.values.values()))

    def test_deterministic(self):
        hint = ShapeHint(time_steps=6, parameters=("Temperature", "Humidity"))

        first = self.synthesizer.synthesize(hint)
        second = FallbackSynthesizer().synthesize(hint)

        self.assertEqual(first, second)

    def test_seed_shifts_values(self):
        plain = self.synthesizer.synthesize(ShapeHint(time_steps=6))
        seeded = self.synthesizer.synthesize(ShapeHint(time_steps=6, seed=3))

        self.assertNotEqual([p["temperature"] for p in plain], [p["temperature"] for p in seeded])

    def test_custom_start_and_step(self):
        points = self.synthesizer.synthesize(
            ShapeHint(time_steps=3, start="2025-06-01T12:00:00Z", step_minutes=30)
        )

        self.assertEqual(
            [p.time for p in points],
            ["2025-06-01T12:00:00Z", "2025-06-01T12:30:00Z", "2025-06-01T13:00:00Z"]
        )

    def test_zero_steps(self):
        self.assertEqual(self.synthesizer.synthesize(ShapeHint(time_steps=0)), [])

    def test_invalid_hint(self):
        with self.assertRaises(ValueError):
            self.synthesizer.synthesize(ShapeHint(time_steps=-1))
        with self.assertRaises(ValueError):
            self.synthesizer.synthesize(ShapeHint(step_minutes=0))

    def test_temperature_curve(self):
        """Base 5 with a 3 degree daily swing, colder further north."""
        self.assertEqual(FallbackSynthesizer.synthetic_value("Temperature", 0), 5.0)
        self.assertEqual(FallbackSynthesizer.synthetic_value("Temperature", 6), 8.0)
        self.assertEqual(FallbackSynthesizer.synthetic_value("Temperature", 18), 2.0)
        self.assertEqual(FallbackSynthesizer.synthetic_value("Temperature", 0, latitude=65.0), 2.0)

    def test_non_negative_quantities(self):
        for index in range(24):
            self.assertGreaterEqual(FallbackSynthesizer.synthetic_value("Precipitation1h", index), 0.0)

    def test_weather_symbol_follows_cloud_cover(self):
        self.assertEqual(FallbackSynthesizer.synthetic_value("WeatherSymbol3", 6), 22.0)
        self.assertEqual(FallbackSynthesizer.synthetic_value("WeatherSymbol3", 18), 1.0)

    def test_unknown_parameter(self):
        self.assertEqual(FallbackSynthesizer.synthetic_value("Mystery", 18), -1.0)

    def test_area_coverage_length(self):
        hint = ShapeHint(
            time_steps=2,
            parameters=("Temperature",),
            x_values=(20.0, 21.0, 22.0),
            y_values=(60.0, 61.0)
        )

        coverage = self.synthesizer.synthesize_coverage(hint)

        self.assertEqual(len(coverage["ranges"]["Temperature"]["values"]), 12)
        self.assertEqual(coverage["parameters"]["Temperature"]["unit"]["symbol"], "°C")

    def test_synthesize_grid(self):
        hint = ShapeHint(time_steps=1, x_values=(20.0, 21.0, 22.0), y_values=(60.0, 61.0))

        points = self.synthesizer.synthesize_grid(hint, "WindSpeedMS")

        self.assertEqual(len(points), 6)
        self.assertEqual((points[4].longitude, points[4].latitude), (21.0, 61.0))
        self.assertTrue(all(p.value is not None for p in points))

    def test_grid_needs_area_hint(self):
        with self.assertRaises(ValueError):
            self.synthesizer.synthesize_grid(ShapeHint(), "Temperature")


class TestGridAxes(unittest.TestCase):
    """Test cases for grid_axes."""

    def test_covers_bounds(self):
        xs, ys = grid_axes((5.0, 55.0, 31.0, 71.0), 14, 9)

        self.assertEqual(len(xs), 14)
        self.assertEqual(len(ys), 9)
        self.assertEqual((xs[0], xs[-1]), (5.0, 31.0))
        self.assertEqual((ys[0], ys[-1]), (55.0, 71.0))
        self.assertEqual(ys[1], 57.0)

    def test_too_small(self):
        with self.assertRaises(ValueError):
            grid_axes((5.0, 55.0, 31.0, 71.0), 1, 9)


class TestWithFallback(unittest.TestCase):
    """Test cases for with_fallback."""

    def setUp(self):
        """Set up test fixtures."""
        self.logger = Mock()

    def test_live_result(self):
        result = with_fallback(lambda: [1.0], lambda: [0.0], self.logger)

        self.assertEqual(result.data, [1.0])
        self.assertFalse(result.is_synthetic)
        self.assertIsNone(result.error)
        self.assertIsNone(result.notice)

    def test_fetch_error_uses_synthetic(self):
        error = FetchError("Request failed with status 503", status_code=503)

        def failing():
            raise error

        result = with_fallback(failing, lambda: [0.0], self.logger)

        self.assertEqual(result.data, [0.0])
        self.assertTrue(result.is_synthetic)
        self.assertIs(result.error, error)
        self.assertIn("demo data", result.notice)
        self.logger.warning.assert_called_once()

    def test_malformed_response_uses_synthetic(self):
        def failing():
            raise MalformedResponseError("no time axis")

        result = with_fallback(failing, lambda: "demo", self.logger)

        self.assertTrue(result.is_synthetic)
        self.assertIn("no time axis", result.notice)

    def test_other_errors_propagate(self):
        def failing():
            raise KeyError("bug")

        synthesizer = Mock()
        with self.assertRaises(KeyError):
            with_fallback(failing, synthesizer, self.logger)
        synthesizer.assert_not_called()

    def test_result_defaults(self):
        result = FallbackResult(data=[])
        self.assertFalse(result.is_synthetic)

    def test_requested_demo_notice(self):
        result = FallbackResult(data=[], is_synthetic=True)
        self.assertEqual(result.notice, "Showing demo data")
