"""Place name -> display forecast, with a bounded total query time."""

import logging
import time
from typing import Callable

from city_forecast.config import Settings
from city_forecast.data import CityCache, GeocodingFetcher, LocationResolver
from city_forecast.errors import ForecastError, NotFound, UpstreamUnavailable
from city_forecast.forecast import ForecastPipeline
from city_forecast.models import NamedLocation, WeatherDisplay


logger = logging.getLogger(__name__)


class WeatherService:
    """Resolves a city and fetches its forecast, one query at a time."""

    def __init__(
        self,
        settings: Settings | None = None,
        resolver: LocationResolver | None = None,
        pipeline: ForecastPipeline | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.settings = settings or Settings()
        self.settings.validate()
        self.cache = resolver.cache if resolver else CityCache(self.settings.db_path)
        self.resolver = resolver or LocationResolver(
            self.cache, GeocodingFetcher(self.settings)
        )
        self.pipeline = pipeline or ForecastPipeline(self.settings)
        self._clock = clock

    def close(self) -> None:
        """Close HTTP clients."""
        self.resolver.geocoder.close()
        self.pipeline.close()

    def __enter__(self) -> "WeatherService":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _remaining(self, deadline: float) -> float:
        """Time left before the deadline, capped at the per-request timeout."""
        remaining = deadline - self._clock()
        if remaining <= 0:
            raise UpstreamUnavailable(
                f"query deadline of {self.settings.query_timeout:.0f}s exceeded"
            )
        return min(remaining, self.settings.request_timeout)

    def get_weather(self, city: str) -> WeatherDisplay:
        """
        Resolve a city name and return its display forecast.

        Raises:
            NotFound: If the name is blank or the geocoder has no match
            ForecastError: Any other resolver or pipeline failure
        """
        name = city.strip()
        if not name:
            raise NotFound("city name is empty")

        deadline = self._clock() + self.settings.query_timeout
        coordinate = self.resolver.resolve(name, timeout=self._remaining(deadline))
        return self.pipeline.forecast(name, coordinate, timeout=self._remaining(deadline))

    def get_cached_cities(self) -> list[NamedLocation]:
        """All cities resolved so far."""
        return self.cache.list_cities()


def main() -> None:
    """CLI entry point."""
    import argparse
    import sys

    from city_forecast.ui.html_exporter import export_html

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Hourly temperature forecast for a city")
    parser.add_argument("city", nargs="?", help="City name, e.g. Paris")
    parser.add_argument(
        "--status",
        action="store_true",
        help="List cached cities and exit",
    )
    parser.add_argument(
        "--html",
        type=str,
        default=None,
        help="Also write the forecast as a static HTML page to this path",
    )
    args = parser.parse_args()

    try:
        with WeatherService() as service:
            if args.status:
                cities = service.get_cached_cities()
                print("\nCached cities:")
                print("-" * 50)
                for location in cities:
                    coord = location.coordinate
                    print(f"{location.name:30} | {coord.latitude:9.4f} | {coord.longitude:9.4f}")
                print(f"\n{len(cities)} cities cached")
                return

            if not args.city:
                parser.error("a city name is required unless --status is given")

            display = service.get_weather(args.city)

        print(f"\nForecast for {display.city}")
        print("=" * 30)
        for entry in display.forecasts:
            print(f"  {entry.label:12} {entry.temperature_label:>8}")

        if args.html:
            path = export_html(display, args.html)
            print(f"\nHTML written to: {path}")

    except ValueError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)
    except ForecastError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
