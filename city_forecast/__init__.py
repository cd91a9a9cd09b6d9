"""City forecast: cached geocoding plus hourly temperature forecasts."""
