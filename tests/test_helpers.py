"""
Tests for query helpers, date utilities and reference locations.
"""

from datetime import datetime

import pytest
import pytz

from src.edr_weather.api.helpers import (
    bounds_to_polygon,
    build_endpoint,
    build_query_options,
    format_datetime_range,
    format_point,
    format_polygon,
    join_parameter_names,
)
from src.edr_weather.core.constants import SCANDINAVIA_BOUNDS
from src.edr_weather.core.date_utils import DateUtils
from src.edr_weather.models import Collection
from src.edr_weather.locations import (
    CITIES,
    GULF_OF_FINLAND_STATIONS,
    default_city,
    find_city,
    search_cities,
)


class TestGeometry:
    """Test cases for WKT formatting."""

    def test_point_is_lon_lat(self):
        assert format_point(60.1699, 24.9384) == "POINT(24.9384 60.1699)"

    def test_point_rounding(self):
        assert format_point(60.123456, 24.0) == "POINT(24.0000 60.1235)"

    def test_bounds_polygon(self):
        assert bounds_to_polygon(SCANDINAVIA_BOUNDS) == "POLYGON((5 55, 31 55, 31 71, 5 71, 5 55))"

    def test_polygon_closes_ring(self):
        wkt = format_polygon([(24.5, 60.0), (25.5, 60.0), (25.0, 60.5)])
        assert wkt == "POLYGON((24.5 60, 25.5 60, 25 60.5, 24.5 60))"

    def test_polygon_too_few_vertices(self):
        with pytest.raises(ValueError):
            format_polygon([(24.0, 60.0), (25.0, 60.0)])


class TestQueryOptions:
    """Test cases for query string building."""

    def test_join_names(self):
        assert join_parameter_names(["Temperature", " WindSpeedMS ", ""]) == "Temperature,WindSpeedMS"

    def test_options_without_datetime(self):
        assert build_query_options(["Temperature"]) == {
            "f": "CoverageJSON",
            "parameter-name": "Temperature",
        }

    def test_options_with_datetime(self):
        options = build_query_options(["Temperature"], "2025-01-01T00:00:00Z/2025-01-02T00:00:00Z")
        assert options["datetime"] == "2025-01-01T00:00:00Z/2025-01-02T00:00:00Z"

    def test_endpoint_encoding(self):
        endpoint = build_endpoint("/collections/pal_skandinavia/position", {
            "coords": "POINT(24.9384 60.1699)",
            "parameter-name": "Temperature,WindSpeedMS",
        })

        assert endpoint.startswith("/collections/pal_skandinavia/position?")
        assert "coords=POINT%2824.9384%2060.1699%29" in endpoint
        assert "parameter-name=Temperature,WindSpeedMS" in endpoint

    def test_endpoint_without_params(self):
        assert build_endpoint("/collections", {}) == "/collections"

    def test_datetime_range(self):
        start = datetime(2025, 1, 1, tzinfo=pytz.UTC)
        end = datetime(2025, 1, 1, 12, 30, 15, 999, tzinfo=pytz.UTC)
        assert format_datetime_range(start, end) == "2025-01-01T00:00:00Z/2025-01-01T12:30:15Z"

    def test_datetime_range_reversed(self):
        start = datetime(2025, 1, 2, tzinfo=pytz.UTC)
        with pytest.raises(ValueError):
            format_datetime_range(start, datetime(2025, 1, 1, tzinfo=pytz.UTC))


class TestDateUtils:
    """Test cases for DateUtils."""

    def test_parse_z_suffix(self):
        dt = DateUtils.parse_timestamp("2025-01-01T12:00:00Z")
        assert dt == datetime(2025, 1, 1, 12, tzinfo=pytz.UTC)

    def test_naive_is_utc(self):
        assert DateUtils.to_epoch_millis("1970-01-01T00:00:01") == 1000

    def test_invalid_timestamp(self):
        with pytest.raises(ValueError):
            DateUtils.parse_timestamp("not a time")

    def test_invalid_timezone(self):
        with pytest.raises(ValueError):
            DateUtils.parse_timezone("Invalid/Zone")

    def test_utc_day_range(self):
        assert DateUtils().get_utc_day_range("2025-11-24") == (
            "2025-11-24T00:00:00Z",
            "2025-11-24T23:59:59Z",
        )

    def test_days_from_midnight(self):
        ref = datetime(2025, 5, 10, 15, 45, tzinfo=pytz.UTC)
        start, end = DateUtils.days_from_midnight(2, ref)
        assert start == datetime(2025, 5, 10, tzinfo=pytz.UTC)
        assert end == datetime(2025, 5, 12, tzinfo=pytz.UTC)

    def test_hours_ahead_naive_reference(self):
        start, end = DateUtils.hours_ahead(12, datetime(2025, 5, 10, 6))
        assert start.tzinfo is not None
        assert (end - start).total_seconds() == 12 * 3600


class TestLocations:
    """Test cases for reference locations."""

    def test_default_city(self):
        assert default_city().name == "Helsinki"

    def test_find_city_ignores_case(self):
        assert find_city("oulu").latitude == pytest.approx(65.0121)

    def test_find_unknown_city(self):
        with pytest.raises(KeyError):
            find_city("Atlantis")

    def test_search_by_country(self):
        assert {c.name for c in search_cities("swe")} == {"Stockholm"}

    def test_unique_names_and_ids(self):
        assert len({c.name for c in CITIES}) == len(CITIES)
        assert len({s.fmisid for s in GULF_OF_FINLAND_STATIONS}) == len(GULF_OF_FINLAND_STATIONS)


class TestCollectionModel:
    """Test cases for Collection parsing."""

    def test_from_listing(self, collections_response):
        collections = [Collection.from_dict(item) for item in collections_response["collections"]]

        assert collections[0].title == "PAL-AROME Scandinavia"
        assert collections[0].bbox == [5.0, 55.0, 31.0, 71.0]
        assert "Temperature" in collections[0].parameter_names
        assert collections[1].extent is None
