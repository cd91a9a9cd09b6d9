"""Cache-aside resolution of place names to coordinates."""

import logging
import sqlite3

from city_forecast.data.cache import CityCache
from city_forecast.data.geocoder import GeocodingFetcher
from city_forecast.errors import StoreReadError, StoreWriteError
from city_forecast.models import Coordinate, LookupStatus


logger = logging.getLogger(__name__)


class LocationResolver:
    """Maps place names to coordinates, geocoding only on a cache miss."""

    def __init__(self, cache: CityCache, geocoder: GeocodingFetcher) -> None:
        self.cache = cache
        self.geocoder = geocoder

    def resolve(self, name: str, timeout: float | None = None) -> Coordinate:
        """
        Resolve a place name to a coordinate.

        A cached name is returned without any external call. Otherwise the
        geocoder's first result is written back to the cache and returned.

        Args:
            name: Place name, used verbatim as the cache key
            timeout: Timeout for the geocoding call, in seconds

        Raises:
            StoreReadError: If the cache cannot be queried
            NotFound: If the geocoder has no match (nothing is written)
            StoreWriteError: If the write-back fails; the coordinate is discarded
        """
        lookup = self.cache.lookup(name)

        if lookup.status is LookupStatus.HIT:
            logger.info(f"Cache hit for {name!r}")
            return lookup.coordinate

        if lookup.status is LookupStatus.ERROR:
            logger.warning(f"Cache lookup failed for {name!r}: {lookup.error}")
            raise StoreReadError(
                f"error querying city cache for {name!r}: {lookup.error}"
            ) from lookup.error

        logger.info(f"Cache miss for {name!r}, geocoding...")
        coordinate = self.geocoder.fetch_coordinate(name, timeout=timeout)

        try:
            self.cache.store_city(name, coordinate)
        except sqlite3.Error as e:
            logger.error(f"Could not cache {name!r}: {e}")
            raise StoreWriteError(f"error caching {name!r}: {e}") from e

        logger.info(
            f"  Cached {name!r} at ({coordinate.latitude:.4f}, {coordinate.longitude:.4f})"
        )
        return coordinate
