"""
PV Yield App configuration and constants.
"""

import os
from dataclasses import dataclass
from typing import Optional

from pvyield.errors import ConfigurationError


# Upstream endpoints
POSTAL_LOOKUP_URL = "https://api.worldpostallocations.com/pincode"
NREL_PVWATTS_URL = "https://developer.nrel.gov/api/pvwatts/v8.json"

# Fixed PVWatts system parameters sent with every simulation request.
# The model always runs at a 1 kW reference system.
PVWATTS_SYSTEM_PARAMS = {
    "system_capacity": 1,
    "azimuth": 180,   # degrees, due south
    "tilt": 40,       # degrees
    "array_type": 1,  # fixed, roof mounted
    "module_type": 1,  # premium
    "losses": 10,     # %
    "timeframe": "hourly",
}

# Divisor applied when rescaling reference output to the requested capacity:
# value * capacity_kw / REFERENCE_CAPACITY_DIVISOR
REFERENCE_CAPACITY_DIVISOR = 1000.0

HOURS_PER_DAY = 24
DAYS_PER_YEAR = 365
HOURS_PER_YEAR = HOURS_PER_DAY * DAYS_PER_YEAR  # 8760

# The only failure text ever shown to a user
GENERIC_ERROR_MESSAGE = "Data cannot be fetched for this postcode."
PROXY_ERROR_MESSAGE = "Failed to fetch data from NREL API"

# Environment variable names
ENV_API_KEY = "NREL_API"
ENV_PVWATTS_URL = "NREL_PVWATTS_URL"
ENV_POSTAL_LOOKUP_URL = "POSTAL_LOOKUP_URL"
ENV_HTTP_TIMEOUT = "PVYIELD_HTTP_TIMEOUT"


@dataclass(frozen=True)
class Settings:
    """Server-side settings, resolved once at startup."""

    nrel_api_key: str
    pvwatts_url: str = NREL_PVWATTS_URL
    postal_lookup_url: str = POSTAL_LOOKUP_URL
    http_timeout: Optional[float] = None  # seconds; None = transport default


def load_settings(environ: Optional[dict] = None) -> Settings:
    """
    Build Settings from the process environment.

    Raises:
        ConfigurationError: if the NREL API key is absent or a value is invalid.
    """
    env = os.environ if environ is None else environ

    api_key = (env.get(ENV_API_KEY) or "").strip()
    if not api_key:
        raise ConfigurationError(
            f"{ENV_API_KEY} is not set; the NREL proxy cannot start without it."
        )

    timeout_raw = (env.get(ENV_HTTP_TIMEOUT) or "").strip()
    http_timeout = None
    if timeout_raw:
        try:
            http_timeout = float(timeout_raw)
        except ValueError:
            raise ConfigurationError(
                f"{ENV_HTTP_TIMEOUT} must be a number of seconds, got {timeout_raw!r}"
            )
        if http_timeout <= 0:
            raise ConfigurationError(f"{ENV_HTTP_TIMEOUT} must be positive.")

    return Settings(
        nrel_api_key=api_key,
        pvwatts_url=env.get(ENV_PVWATTS_URL) or NREL_PVWATTS_URL,
        postal_lookup_url=env.get(ENV_POSTAL_LOOKUP_URL) or POSTAL_LOOKUP_URL,
        http_timeout=http_timeout,
    )
