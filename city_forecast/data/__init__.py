"""Geocoding and coordinate caching."""

from .cache import CityCache
from .geocoder import GeocodingFetcher
from .resolver import LocationResolver

__all__ = ["CityCache", "GeocodingFetcher", "LocationResolver"]
