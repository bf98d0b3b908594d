"""
Main entry point for the EDR weather client.

Prints a daily forecast for a city, falling back to clearly marked demo data
when live data is unavailable.
"""

import sys
from typing import List, Optional

from .core import Config, setup_logger, LoggerContext
from .api import EdrAPI
from .locations import default_city, find_city
from .models import City, CurrentConditions, DailyAggregate
from .processing import activity_suggestion, describe_weather_symbol
from .services import ForecastService, FallbackResult, with_fallback


class WeatherApp:
    """Command-line application for daily forecasts."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
        """
        self.config = Config(config_file)

        self.logger = setup_logger()
        self.logger.info(f"Configuration: {self.config}")

        self.api_client: Optional[EdrAPI] = None
        self.service: Optional[ForecastService] = None

    def initialize_components(self) -> None:
        """Initialize all application components."""
        self.api_client = EdrAPI(
            base_url=self.config.api_base_url,
            timeout_ms=self.config.api_timeout_ms,
            max_retries=self.config.api_max_retries,
            verify_ssl=self.config.api_verify_ssl,
            logger=self.logger
        )
        self.service = ForecastService(self.api_client, self.config, self.logger)

    def daily_forecast(
        self,
        city: City,
        days: Optional[int] = None,
        demo: bool = False
    ) -> FallbackResult:
        """
        Fetch the daily forecast for a city, with demo-data fallback.

        Args:
            city: City to query
            days: Number of days (config default when None)
            demo: Skip the live query and show demo data
        """
        if self.service is None:
            raise RuntimeError("Components not properly initialized")
        service = self.service

        if demo:
            return FallbackResult(data=service.demo_daily_forecast(days), is_synthetic=True)

        with LoggerContext(self.logger, f"daily forecast for {city.name}"):
            return with_fallback(
                lambda: service.daily_forecast(city.latitude, city.longitude, days),
                lambda: service.demo_daily_forecast(days),
                self.logger
            )

    def current_conditions(self, city: City, demo: bool = False) -> FallbackResult:
        """
        Fetch current conditions for a city with the quick-load timeout.

        Args:
            city: City to query
            demo: Skip the live query and show demo data
        """
        if self.service is None:
            raise RuntimeError("Components not properly initialized")
        service = self.service

        if demo:
            return FallbackResult(data=service.demo_current_conditions(), is_synthetic=True)

        return with_fallback(
            lambda: service.current_conditions(
                city.latitude,
                city.longitude,
                timeout_ms=self.config.quick_load_timeout_ms
            ),
            service.demo_current_conditions,
            self.logger
        )

    @staticmethod
    def format_current(conditions: CurrentConditions) -> str:
        """Render current conditions as a single line."""
        temperature = "--" if conditions.temperature is None else f"{conditions.temperature:.1f}°C"
        wind = "--" if conditions.wind_speed is None else f"{conditions.wind_speed:.1f} m/s"
        line = f"Now: {temperature}, wind {wind}, {describe_weather_symbol(conditions.weather_symbol)}"
        suggestion = activity_suggestion(conditions.weather_symbol, conditions.temperature)
        if suggestion is not None:
            line += f" - {suggestion.emoji} {suggestion.activity}: {suggestion.description}"
        return line

    @staticmethod
    def format_table(city: City, rows: List[DailyAggregate]) -> str:
        """Render daily aggregates as a plain text table."""
        lines = [
            f"Forecast for {city.name}, {city.country}",
            f"{'Date':<12}{'Min':>7}{'Max':>7}{'Mean':>7}  Weather",
        ]
        for row in rows:
            lines.append(
                f"{row.date:<12}{row.min:>7.1f}{row.max:>7.1f}{row.mean:>7.1f}  "
                f"{describe_weather_symbol(row.modal_category)}"
            )
        return "\n".join(lines)

    def run(self, city_name: Optional[str] = None, days: Optional[int] = None, demo: bool = False) -> str:
        """
        Run the forecast for a city and return the rendered table.

        Args:
            city_name: City name (Helsinki when None)
            days: Number of days
            demo: Use demo data only
        """
        city = find_city(city_name) if city_name else default_city()
        try:
            self.initialize_components()
            current = self.current_conditions(city, demo)
            result = self.daily_forecast(city, days, demo)
            output = f"{self.format_table(city, result.data)}\n{self.format_current(current.data)}"
            if result.is_synthetic or current.is_synthetic:
                output = f"{result.notice or current.notice}\n{output}"
            return output
        finally:
            if self.api_client:
                self.api_client.close()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Daily weather forecast from the FMI EDR API"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--city",
        type=str,
        default=None,
        help="City name. Default: Helsinki"
    )
    parser.add_argument(
        "--days",
        type=int,
        default=None,
        help="Number of days to show"
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Show demo data without querying the API"
    )

    args = parser.parse_args()

    try:
        app = WeatherApp(config_file=args.config)
        print(app.run(city_name=args.city, days=args.days, demo=args.demo))
    except KeyError as e:
        print(f"Unknown city: {args.city} ({e})")
        sys.exit(1)
    except Exception as e:
        print(f"Application failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
