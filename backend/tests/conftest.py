"""
Shared fakes and fixtures for geocoder, proxy and pipeline tests.
"""

import pytest
import requests

from pvyield.engine.geocoder import PostalGeocoder
from pvyield.engine.nrel_proxy import NRELProxy


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int = 200, json_data=None, json_error: bool = False):
        self.status_code = status_code
        self._json_data = json_data
        self._json_error = json_error

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self._json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._json_data


class FakeHTTP:
    """Returns (or raises) a fixed outcome and records every GET."""

    def __init__(self, outcome):
        self.outcome = outcome
        self.calls: list[dict] = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


def _pvwatts_payload(ac=None, **overrides) -> dict:
    outputs = {
        "ac": [2.0] * 8760 if ac is None else ac,
        "ac_monthly": [float(100 + m) for m in range(12)],
        "poa_monthly": [float(150 + m) for m in range(12)],
        "solrad_monthly": [4.0 + 0.1 * m for m in range(12)],
        "dc_monthly": [float(110 + m) for m in range(12)],
        "ac_annual": 1450.5,
        "solrad_annual": 5.12,
        "capacity_factor": 16.6,
    }
    outputs.update(overrides)
    return {
        "inputs": {"system_capacity": "1", "tilt": "40"},
        "errors": [],
        "warnings": [],
        "version": "8.0.0",
        "outputs": outputs,
    }


@pytest.fixture
def respond():
    """Build a fake HTTP response: respond(status_code=..., json_data=...)."""
    return FakeResponse


@pytest.fixture
def make_payload():
    """Build a PVWatts-shaped body; hourly AC defaults to a constant 2.0 year."""
    return _pvwatts_payload


@pytest.fixture
def make_geocoder():
    """PostalGeocoder whose lookups return (or raise) `outcome`."""
    def _make(outcome, **kwargs) -> PostalGeocoder:
        return PostalGeocoder(http=FakeHTTP(outcome), **kwargs)
    return _make


@pytest.fixture
def make_proxy():
    """NRELProxy whose upstream calls return (or raise) `outcome`."""
    def _make(outcome, api_key: str = "test-key", **kwargs) -> NRELProxy:
        return NRELProxy(api_key=api_key, http=FakeHTTP(outcome), **kwargs)
    return _make


@pytest.fixture
def mumbai_lookup() -> dict:
    return {
        "status": True,
        "result": [
            {"postalcode": "400001", "latitude": "18.9388", "longitude": "72.8354"},
            {"postalcode": "400001", "latitude": "18.9400", "longitude": "72.8300"},
        ],
    }


@pytest.fixture
def pvwatts_payload() -> dict:
    return _pvwatts_payload()


@pytest.fixture
def geocoder_ok(make_geocoder, mumbai_lookup) -> PostalGeocoder:
    return make_geocoder(FakeResponse(json_data=mumbai_lookup))


@pytest.fixture
def proxy_ok(make_proxy, pvwatts_payload) -> NRELProxy:
    return make_proxy(FakeResponse(json_data=pvwatts_payload))


@pytest.fixture
def proxy_down(make_proxy) -> NRELProxy:
    return make_proxy(requests.exceptions.ConnectionError("connection refused"))
