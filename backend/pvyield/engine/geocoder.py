"""
Postal-code to coordinates resolution.

Queries the worldpostallocations lookup service and keeps only the first
candidate it returns. No retry, no disambiguation.
"""

import logging
import math
from typing import Optional

import requests

from pvyield.config import POSTAL_LOOKUP_URL
from pvyield.errors import UnresolvableLocation
from pvyield.models.geocode import Coordinates

logger = logging.getLogger(__name__)


class PostalGeocoder:
    """Resolves (postal_code, country_code) pairs to Coordinates."""

    def __init__(
        self,
        url: str = POSTAL_LOOKUP_URL,
        timeout: Optional[float] = None,
        http=None,
    ):
        self.url = url
        self.timeout = timeout
        # requests.get opens a fresh session per call: no state shared across submissions
        self.http = http or requests

    def lookup(self, postal_code: str, country_code: str) -> Coordinates:
        """
        Strict lookup.

        Raises:
            UnresolvableLocation: on transport failure, non-success status,
                non-JSON body, empty result list, or unusable lat/long values.
        """
        params = {"postalcode": postal_code, "countrycode": country_code}
        try:
            response = self.http.get(self.url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise UnresolvableLocation(f"Postal lookup request failed: {e}") from e

        if not response.ok:
            raise UnresolvableLocation(
                f"Postal lookup returned HTTP {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UnresolvableLocation("Postal lookup returned a non-JSON body") from e

        results = data.get("result") if isinstance(data, dict) else None
        if not isinstance(results, list) or not results:
            message = data.get("message") if isinstance(data, dict) else None
            raise UnresolvableLocation(
                f"No postal lookup results for {postal_code!r}/{country_code!r}"
                + (f": {message}" if message else "")
            )

        first = results[0]
        if not isinstance(first, dict):
            raise UnresolvableLocation("First postal lookup result is not an object")
        lat = _parse_coordinate(first.get("latitude"))
        lon = _parse_coordinate(first.get("longitude"))
        if lat is None or lon is None:
            raise UnresolvableLocation(
                f"Unparseable coordinates: latitude={first.get('latitude')!r}, "
                f"longitude={first.get('longitude')!r}"
            )
        if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
            raise UnresolvableLocation(f"Coordinates out of range: ({lat}, {lon})")

        return Coordinates(latitude=lat, longitude=lon)

    def resolve(self, postal_code: str, country_code: str) -> Optional[Coordinates]:
        """Lenient lookup: returns None instead of raising when unresolvable."""
        try:
            return self.lookup(postal_code, country_code)
        except UnresolvableLocation as e:
            logger.warning("Unresolved %s/%s: %s", postal_code, country_code, e)
            return None


def _parse_coordinate(value) -> Optional[float]:
    """Parse a latitude/longitude string (or number) to a finite float."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number
