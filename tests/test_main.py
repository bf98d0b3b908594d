"""
Command-line application tests.
"""

import pytest

from src.edr_weather.api.client import APIClient
from src.edr_weather.core.exceptions import FetchError
from src.edr_weather.main import WeatherApp


@pytest.fixture
def app(monkeypatch, tmp_path):
    """Application with its log file and working directory under tmp_path."""
    for name in ("CONFIG_FILE", "EDR_BASE_URL", "EDR_TIMEOUT_MS", "EDR_COLLECTION", "DISPLAY_TIMEZONE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "logs" / "test.log"))
    return WeatherApp()


class TestWeatherApp:
    """Test cases for WeatherApp."""

    def test_demo_run(self, app):
        output = app.run(city_name="oulu", days=2, demo=True)
        lines = output.splitlines()

        assert lines[0] == "Showing demo data"
        assert lines[1] == "Forecast for Oulu, Finland"
        assert lines[3].startswith("2025-01-01")
        assert lines[4].startswith("2025-01-02")
        assert lines[-1].startswith("Now: 5.0°C")
        assert lines[-1].endswith("Stay Cozy: Cold and rainy - stay warm indoors")

    def test_live_failure_falls_back(self, app, monkeypatch):
        def unavailable(self, endpoint, params=None, timeout_ms=None):
            raise FetchError("Request failed with status 503 Service Unavailable", status_code=503)

        monkeypatch.setattr(APIClient, "get", unavailable)

        output = app.run(days=3)

        assert output.startswith("Showing demo data: live data unavailable")
        assert "Forecast for Helsinki, Finland" in output

    def test_unknown_city(self, app):
        with pytest.raises(KeyError):
            app.run(city_name="Atlantis")

    def test_requires_initialization(self, app):
        with pytest.raises(RuntimeError):
            app.daily_forecast(None)
