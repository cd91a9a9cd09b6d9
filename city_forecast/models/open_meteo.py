"""Direct mappings of the Open-Meteo API responses."""

from pydantic import BaseModel, FiniteFloat


class GeocodingResult(BaseModel):
    """One candidate from the geocoding search."""

    latitude: float
    longitude: float


class GeocodingResponse(BaseModel):
    """Geocoding search response. ``results`` is omitted when nothing matches."""

    results: list[GeocodingResult] = []


class HourlyTemperature(BaseModel):
    """Parallel hourly arrays."""

    time: list[str]
    temperature_2m: list[FiniteFloat]


class ForecastResponse(BaseModel):
    """Forecast response. Only ``hourly`` feeds the display; the location fields are optional."""

    latitude: float | None = None
    longitude: float | None = None
    timezone: str | None = None
    hourly: HourlyTemperature
