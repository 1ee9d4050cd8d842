"""NWS API client for public zone listings and zone forecasts."""

import logging
from urllib.parse import quote

import httpx

from nwszones.ingest.errors import TransportError

logger = logging.getLogger(__name__)

NOAA_BASE_URL = "https://api.weather.gov"
# api.weather.gov rejects requests without an identifying User-Agent (403).
DEFAULT_USER_AGENT = "nwszones/0.1.0 (nwszones@example.com)"
PUBLIC_ZONE_TYPE = "public"


class NoaaClient:
    """Scoped wrapper around one httpx.Client.

    Use as a context manager so the connection pool is released on every
    exit path.
    """

    def __init__(
        self,
        base_url: str = NOAA_BASE_URL,
        timeout: float = 30.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http = httpx.Client(
            headers={
                "User-Agent": DEFAULT_USER_AGENT,
                "Accept": "application/geo+json",
            },
            timeout=timeout,
        )

    def __enter__(self) -> "NoaaClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def get_zones(self, area: str) -> dict:
        """Fetch every public zone for a state/territory in one request."""
        url = f"{self.base_url}/zones"
        return self._get_json(url, params={"area": area, "type": PUBLIC_ZONE_TYPE})

    def get_zone_forecast(self, zone_id: str) -> dict:
        """Fetch the narrative forecast for a public zone.

        The id is escaped as a single path segment.
        """
        segment = quote(zone_id, safe="")
        url = f"{self.base_url}/zones/{PUBLIC_ZONE_TYPE}/{segment}/forecast"
        return self._get_json(url)

    def _get_json(self, url: str, params: dict | None = None) -> dict:
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = self._http.get(url, params=params)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("NWS %s returned %d", url, e.response.status_code)
            raise TransportError(
                f"NWS API returned {e.response.status_code} for {e.request.url}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning("NWS request error for %s: %s", url, e)
            raise TransportError(f"NWS API request failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise TransportError(f"NWS API returned malformed JSON for {url}") from e
        if not isinstance(data, dict):
            raise TransportError(f"NWS API returned unexpected JSON for {url}")
        return data
