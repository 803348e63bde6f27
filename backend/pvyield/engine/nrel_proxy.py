"""
Server-side relay to the NREL PVWatts API.

Holds the API credential and the fixed system parameters. The payload is
returned untouched; all interpretation happens in yield_transformer.
"""

import logging
from typing import Optional

import requests

from pvyield.config import NREL_PVWATTS_URL, PVWATTS_SYSTEM_PARAMS
from pvyield.errors import ConfigurationError, UpstreamUnavailable

logger = logging.getLogger(__name__)


class NRELProxy:
    """Forwards (lat, long) to PVWatts with the server-held API key."""

    def __init__(
        self,
        api_key: str,
        url: str = NREL_PVWATTS_URL,
        timeout: Optional[float] = None,
        http=None,
    ):
        if not api_key:
            raise ConfigurationError("NRELProxy requires an API key")
        self._api_key = api_key
        self.url = url
        self.timeout = timeout
        # requests.get opens a fresh session per call: no state shared across submissions
        self.http = http or requests

    def build_params(self, lat: float, long: float) -> dict:
        return {
            "api_key": self._api_key,
            "lat": lat,
            "lon": long,
            **PVWATTS_SYSTEM_PARAMS,
        }

    def fetch(self, lat: float, long: float) -> dict:
        """
        Request an hourly simulation for the given location.

        Returns:
            The upstream JSON body, unmodified.

        Raises:
            UpstreamUnavailable: transport failure, non-success status,
                or a body that is not JSON.
        """
        try:
            response = self.http.get(
                self.url, params=self.build_params(lat, long), timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise UpstreamUnavailable(f"PVWatts request failed: {e}") from e

        if not response.ok:
            raise UpstreamUnavailable(f"PVWatts returned HTTP {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamUnavailable("PVWatts returned a non-JSON body") from e
