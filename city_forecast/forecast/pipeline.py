"""Hourly temperature forecast fetching and display formatting.

Temperatures are always treated as Celsius: the request does not ask for a
unit and the response's unit metadata is ignored.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP, localcontext

import httpx
import pandas as pd
from pydantic import ValidationError

from city_forecast.config import Settings
from city_forecast.data.http import get_body
from city_forecast.errors import MalformedResponse, TimeParseError
from city_forecast.models import Coordinate, DisplayForecastEntry, WeatherDisplay
from city_forecast.models.open_meteo import ForecastResponse


logger = logging.getLogger(__name__)

# Layout of hourly.time entries as sent by Open-Meteo: no seconds, no zone
TIME_FORMAT = "%Y-%m-%dT%H:%M"
LABEL_FORMAT = "%a %H:%M"
TEMPERATURE_UNIT = "°C"


def format_temperature(value: float) -> str:
    """
    Format a temperature with one decimal and the Celsius suffix.

    Rounds half-up on the shortest decimal form of the float, so 18.45
    gives "18.5°C" even though its binary value is just below 18.45.
    """
    with localcontext() as ctx:
        # Enough digits to quantize the largest finite float to 0.1
        ctx.prec = 400
        rounded = Decimal(repr(float(value))).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{rounded}{TEMPERATURE_UNIT}"


def parse_times(times: pd.Series) -> pd.Series:
    """
    Parse forecast time strings with TIME_FORMAT.

    Raises:
        TimeParseError: If any entry does not match; the whole batch fails
    """
    try:
        parsed = pd.to_datetime(times, format=TIME_FORMAT, exact=True)
    except (ValueError, TypeError) as e:
        raise TimeParseError(f"error parsing forecast time: {e}") from e

    # Empty strings and "NaT" parse to NaT instead of raising
    if parsed.isna().any():
        bad = times[parsed.isna()].iloc[0]
        raise TimeParseError(f"error parsing forecast time {bad!r}")

    # to_datetime also accepts unpadded fields and words like "now"
    mismatched = parsed.dt.strftime(TIME_FORMAT) != times
    if mismatched.any():
        bad = times[mismatched].iloc[0]
        raise TimeParseError(f"forecast time {bad!r} does not match {TIME_FORMAT!r}")
    return parsed


class ForecastPipeline:
    """Fetches hourly temperatures from Open-Meteo and shapes them for display."""

    BASE_URL = "https://api.open-meteo.com/v1/forecast"

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

    def __enter__(self) -> "ForecastPipeline":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def fetch_forecast(self, coordinate: Coordinate, timeout: float | None = None) -> bytes:
        """
        Fetch the raw hourly temperature forecast for a coordinate.

        Returns:
            Unparsed response body

        Raises:
            UpstreamUnavailable: If the API cannot be reached
            ReadError: If the body cannot be read completely
        """
        logger.info(
            f"Fetching forecast for ({coordinate.latitude:.4f}, {coordinate.longitude:.4f})..."
        )
        return get_body(
            self.client,
            self.BASE_URL,
            params={
                "latitude": f"{coordinate.latitude:.6f}",
                "longitude": f"{coordinate.longitude:.6f}",
                "hourly": "temperature_2m",
            },
            timeout=timeout,
        )

    def transform(self, city_name: str, raw_body: bytes | str) -> WeatherDisplay:
        """
        Turn a raw forecast body into display rows, one per hourly sample.

        Row order follows the upstream time array.

        Raises:
            MalformedResponse: If the body does not match the schema or the
                time and temperature arrays differ in length
            TimeParseError: If any time string does not match TIME_FORMAT
        """
        try:
            response = ForecastResponse.model_validate_json(raw_body)
        except ValidationError as e:
            raise MalformedResponse(f"error decoding weather response: {e}") from e

        hourly = response.hourly
        if len(hourly.time) != len(hourly.temperature_2m):
            raise MalformedResponse(
                f"hourly arrays differ in length: {len(hourly.time)} times, "
                f"{len(hourly.temperature_2m)} temperatures"
            )

        if not hourly.time:
            return WeatherDisplay(city=city_name)

        df = pd.DataFrame({"time": hourly.time, "temperature": hourly.temperature_2m})
        labels = parse_times(df["time"]).dt.strftime(LABEL_FORMAT)

        forecasts = [
            DisplayForecastEntry(label=label, temperature_label=format_temperature(temp))
            for label, temp in zip(labels.tolist(), df["temperature"].tolist())
        ]
        return WeatherDisplay(city=city_name, forecasts=forecasts)

    def forecast(
        self, city_name: str, coordinate: Coordinate, timeout: float | None = None
    ) -> WeatherDisplay:
        """Fetch and transform in one step."""
        raw_body = self.fetch_forecast(coordinate, timeout=timeout)
        display = self.transform(city_name, raw_body)
        logger.info(f"  {len(display.forecasts)} hourly entries for {city_name!r}")
        return display
