"""Error kinds raised by the resolver and the forecast pipeline.

Every error derives from ForecastError, so a caller that only wants one
failure value can catch the base class and show ``str(err)``.
"""


class ForecastError(Exception):
    """Base class for every failure of a forecast query."""


class NotFound(ForecastError):
    """The geocoder returned no candidates for the place name."""


class UpstreamUnavailable(ForecastError):
    """An upstream service could not be reached, timed out, or returned an error status."""


class ReadError(ForecastError):
    """An upstream response body could not be read completely."""


class MalformedResponse(ForecastError):
    """An upstream response body does not match the expected schema."""


class TimeParseError(ForecastError):
    """A forecast time string does not match the expected layout."""


class StoreReadError(ForecastError):
    """The city store could not be queried."""


class StoreWriteError(ForecastError):
    """A resolved coordinate could not be written back to the city store."""
