"""Data models."""

from .weather_data import (
    CacheLookup,
    Coordinate,
    DisplayForecastEntry,
    LookupStatus,
    NamedLocation,
    WeatherDisplay,
)

__all__ = [
    "CacheLookup",
    "Coordinate",
    "DisplayForecastEntry",
    "LookupStatus",
    "NamedLocation",
    "WeatherDisplay",
]
