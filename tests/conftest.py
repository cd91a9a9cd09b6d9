"""Shared fixtures: a fake Open-Meteo upstream and a temporary city cache."""

import httpx
import pytest

from city_forecast.config import Settings
from city_forecast.data import CityCache, GeocodingFetcher, LocationResolver
from city_forecast.forecast import ForecastPipeline


GEOCODING_HOST = "geocoding-api.open-meteo.com"
FORECAST_HOST = "api.open-meteo.com"

PARIS_GEOCODE = {
    "results": [
        {"name": "Paris", "latitude": 48.8566, "longitude": 2.3522, "country": "France"},
        {"name": "Paris", "latitude": 33.6609, "longitude": -95.5555, "country": "United States"},
    ],
    "generationtime_ms": 0.7,
}

PARIS_FORECAST = {
    "latitude": 48.86,
    "longitude": 2.35,
    "timezone": "GMT",
    "hourly": {"time": ["2024-03-11T14:00"], "temperature_2m": [18.45]},
}


class FakeUpstream:
    """Answers geocoding and forecast requests and records every request.

    ``geocoding`` and ``forecast`` hold either a JSON payload or a callable
    taking the request and returning an httpx.Response.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.geocoding = PARIS_GEOCODE
        self.forecast = PARIS_FORECAST

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == GEOCODING_HOST:
            return self._respond(self.geocoding, request)
        if request.url.host == FORECAST_HOST:
            return self._respond(self.forecast, request)
        return httpx.Response(404)

    @staticmethod
    def _respond(payload, request: httpx.Request) -> httpx.Response:
        if callable(payload):
            return payload(request)
        return httpx.Response(200, json=payload)

    def calls(self, host: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(cache_dir=tmp_path / "cache", request_timeout=10.0, query_timeout=20.0)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def http_client(upstream):
    client = httpx.Client(transport=httpx.MockTransport(upstream.handler))
    yield client
    client.close()


@pytest.fixture
def cache(settings) -> CityCache:
    return CityCache(settings.db_path)


@pytest.fixture
def geocoder(settings, http_client) -> GeocodingFetcher:
    return GeocodingFetcher(settings, client=http_client)


@pytest.fixture
def resolver(cache, geocoder) -> LocationResolver:
    return LocationResolver(cache, geocoder)


@pytest.fixture
def pipeline(settings, http_client) -> ForecastPipeline:
    return ForecastPipeline(settings, client=http_client)
