"""Forecast fetching and formatting."""

from city_forecast.forecast.pipeline import ForecastPipeline, format_temperature

__all__ = ["ForecastPipeline", "format_temperature"]
