"""Shared GET helper for the Open-Meteo fetchers."""

import logging
import time

import httpx

from city_forecast.errors import ReadError, UpstreamUnavailable


logger = logging.getLogger(__name__)

clock = time.monotonic


def get_body(
    client: httpx.Client,
    url: str,
    params: dict,
    timeout: float | None = None,
) -> bytes:
    """
    Issue a GET and return the raw response body.

    httpx applies ``timeout`` to each network phase separately, so the
    elapsed time is also checked after every body chunk. A call therefore
    takes at most ``timeout`` plus one read wait.

    Args:
        client: HTTP client to send the request with
        url: Endpoint URL
        params: Query parameters (httpx URL-escapes them)
        timeout: Per-call time budget in seconds, or None for the client default

    Raises:
        UpstreamUnavailable: On transport failure, timeout, exhausted budget or non-2xx status
        ReadError: If the body cannot be read completely
    """
    request_timeout = httpx.USE_CLIENT_DEFAULT if timeout is None else timeout
    started = clock()
    try:
        with client.stream("GET", url, params=params, timeout=request_timeout) as response:
            response.raise_for_status()
            chunks = []
            try:
                for chunk in response.iter_bytes():
                    chunks.append(chunk)
                    if timeout is not None and clock() - started > timeout:
                        logger.error(f"Timed out reading body from {url}")
                        raise UpstreamUnavailable(
                            f"{url} did not finish sending within {timeout:.1f}s"
                        )
            except httpx.HTTPError as e:
                raise ReadError(f"error reading response body from {url}: {e}") from e
            return b"".join(chunks)
    except httpx.HTTPStatusError as e:
        logger.error(f"HTTP error from {url}: {e.response.status_code}")
        raise UpstreamUnavailable(
            f"{url} returned HTTP {e.response.status_code}"
        ) from e
    except httpx.HTTPError as e:
        logger.error(f"Error making request to {url}: {e}")
        raise UpstreamUnavailable(f"error making request to {url}: {e}") from e
