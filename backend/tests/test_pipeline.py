"""
Tests for the two-stage solar yield pipeline.
"""

import pytest

from pvyield.engine.pipeline import fetch_yield, run_pipeline
from pvyield.errors import (
    MalformedResponse,
    RetrievalError,
    UnresolvableLocation,
    UpstreamUnavailable,
)
from pvyield.models.geocode import Coordinates, PostalQuery

QUERY = PostalQuery(postal_code="400001", country_code="IN")


class TestRunPipeline:
    def test_success(self, geocoder_ok, proxy_ok):
        bundle = run_pipeline(QUERY, 1000.0, geocoder_ok, proxy_ok)
        assert bundle.coordinates.latitude == pytest.approx(18.9388)
        assert len(bundle.hourly) == 8760
        assert len(bundle.daily_averages) == 365
        assert len(bundle.first_day) == 24

    def test_geocoded_coordinates_reach_proxy(self, geocoder_ok, proxy_ok):
        run_pipeline(QUERY, 1.0, geocoder_ok, proxy_ok)
        params = proxy_ok.http.calls[0]["params"]
        assert params["lat"] == pytest.approx(18.9388)
        assert params["lon"] == pytest.approx(72.8354)

    def test_unresolved_skips_simulation(self, make_geocoder, respond, proxy_ok):
        geocoder = make_geocoder(respond(json_data={"result": []}))
        with pytest.raises(UnresolvableLocation):
            run_pipeline(QUERY, 1000.0, geocoder, proxy_ok)
        assert proxy_ok.http.calls == []

    def test_proxy_failure(self, geocoder_ok, proxy_down):
        with pytest.raises(UpstreamUnavailable):
            run_pipeline(QUERY, 1000.0, geocoder_ok, proxy_down)

    def test_proxy_http_500(self, geocoder_ok, make_proxy, respond):
        with pytest.raises(RetrievalError):
            run_pipeline(QUERY, 1000.0, geocoder_ok, make_proxy(respond(status_code=500)))


class TestFetchYield:
    def test_malformed_payload(self, make_proxy, respond):
        proxy = make_proxy(respond(json_data={"outputs": {}}))
        with pytest.raises(MalformedResponse):
            fetch_yield(Coordinates(latitude=1.0, longitude=2.0), 1.0, proxy)

    def test_rescaled(self, proxy_ok):
        bundle = fetch_yield(Coordinates(latitude=1.0, longitude=2.0), 500.0, proxy_ok)
        assert bundle.hourly[0] == 2.0 * 500.0 / 1000
