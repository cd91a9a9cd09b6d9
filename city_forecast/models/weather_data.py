"""Data models for locations and forecasts."""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Coordinate:
    """Latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class NamedLocation:
    """A cached place name and its coordinate."""

    name: str
    coordinate: Coordinate


@dataclass(frozen=True)
class DisplayForecastEntry:
    """Single formatted forecast row, e.g. ("Mon 14:00", "18.5°C")."""

    label: str
    temperature_label: str


@dataclass
class WeatherDisplay:
    """Display-ready forecast for one city."""

    city: str
    forecasts: list[DisplayForecastEntry] = field(default_factory=list)


class LookupStatus(Enum):
    """Outcome of a city store lookup."""

    HIT = "hit"
    MISS = "miss"
    ERROR = "error"


@dataclass(frozen=True)
class CacheLookup:
    """Tagged result of a store read: a hit carries the coordinate, an error its cause."""

    status: LookupStatus
    coordinate: Coordinate | None = None
    error: Exception | None = None

    @classmethod
    def hit(cls, coordinate: Coordinate) -> "CacheLookup":
        return cls(LookupStatus.HIT, coordinate=coordinate)

    @classmethod
    def miss(cls) -> "CacheLookup":
        return cls(LookupStatus.MISS)

    @classmethod
    def failed(cls, error: Exception) -> "CacheLookup":
        return cls(LookupStatus.ERROR, error=error)
