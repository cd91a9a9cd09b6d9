"""Open-Meteo geocoding client."""

import httpx
from pydantic import ValidationError

from city_forecast.config import Settings
from city_forecast.data.http import get_body
from city_forecast.errors import MalformedResponse, NotFound
from city_forecast.models import Coordinate
from city_forecast.models.open_meteo import GeocodingResponse


class GeocodingFetcher:
    """Resolves free-text place names with the Open-Meteo geocoding API."""

    BASE_URL = "https://geocoding-api.open-meteo.com/v1/search"

    def __init__(
        self, settings: Settings | None = None, client: httpx.Client | None = None
    ) -> None:
        self.settings = settings or Settings()
        self._client = client

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.settings.request_timeout)
        return self._client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "GeocodingFetcher":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def fetch_coordinate(self, name: str, timeout: float | None = None) -> Coordinate:
        """
        Look up the best match for a place name.

        Only the first result is used; the API's own ranking decides.

        Raises:
            NotFound: If the search returns no results
            MalformedResponse: If the body is not a geocoding response
            UpstreamUnavailable: If the API cannot be reached
        """
        body = get_body(
            self.client,
            self.BASE_URL,
            params={"name": name, "count": 1, "language": "en", "format": "json"},
            timeout=timeout,
        )

        try:
            response = GeocodingResponse.model_validate_json(body)
        except ValidationError as e:
            raise MalformedResponse(f"error decoding geocoding response: {e}") from e

        if not response.results:
            raise NotFound(f"no results found for {name!r}")

        first = response.results[0]
        return Coordinate(latitude=first.latitude, longitude=first.longitude)
