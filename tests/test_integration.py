"""
Live EDR API integration tests.

These tests query opendata.fmi.fi and only run when EDR_LIVE_TESTS is set.
"""

import os

import pytest  # type: ignore

from src.edr_weather.api import EdrAPI
from src.edr_weather.core import Config
from src.edr_weather.locations import default_city
from src.edr_weather.services import ForecastService


pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not os.getenv("EDR_LIVE_TESTS"), reason="Set EDR_LIVE_TESTS=1 to query the live API"),
]


@pytest.fixture(scope="module")
def api_client():
    """Create API client from the default configuration."""
    config = Config()
    client = EdrAPI(
        base_url=config.api_base_url,
        timeout_ms=config.quick_load_timeout_ms * 2,
        max_retries=1,
    )
    yield client
    client.close()


class TestLiveAPI:
    """Smoke tests against the public endpoint."""

    def test_collections(self, api_client):
        ids = [c.id for c in api_client.list_collections()]
        assert "pal_skandinavia" in ids

    def test_daily_forecast(self, api_client):
        city = default_city()
        days = ForecastService(api_client).daily_forecast(city.latitude, city.longitude, days=2)

        assert 1 <= len(days) <= 2
        for day in days:
            assert day.min <= day.mean <= day.max
