"""
Two-stage solar yield pipeline: postal code -> coordinates -> rescaled yield.
"""

import logging

from pvyield.engine.geocoder import PostalGeocoder
from pvyield.engine.nrel_proxy import NRELProxy
from pvyield.engine.yield_transformer import build_yield_bundle
from pvyield.errors import UnresolvableLocation
from pvyield.models.geocode import Coordinates, PostalQuery
from pvyield.models.solar_yield import YieldBundle

logger = logging.getLogger(__name__)


def fetch_yield(
    coordinates: Coordinates,
    capacity_kw: float,
    proxy: NRELProxy,
) -> YieldBundle:
    """
    Retrieve the reference simulation for `coordinates` and rescale it.

    Raises:
        UpstreamUnavailable: the proxy could not get a response.
        MalformedResponse: the response could not be interpreted.
    """
    payload = proxy.fetch(coordinates.latitude, coordinates.longitude)
    return build_yield_bundle(payload, coordinates, capacity_kw)


def run_pipeline(
    query: PostalQuery,
    capacity_kw: float,
    geocoder: PostalGeocoder,
    proxy: NRELProxy,
) -> YieldBundle:
    """
    Resolve the postal code, then fetch and rescale its yield.

    The simulation is never requested when the location is unresolved.

    Raises:
        UnresolvableLocation: stage 1 produced no coordinates.
        RetrievalError: stage 2 failed.
    """
    coordinates = geocoder.resolve(query.postal_code, query.country_code)
    if coordinates is None:
        raise UnresolvableLocation(
            f"No coordinates for {query.postal_code!r}/{query.country_code!r}"
        )

    bundle = fetch_yield(coordinates, capacity_kw, proxy)
    logger.info(
        "Yield computed for %s/%s at (%.4f, %.4f), %.3f kW",
        query.postal_code,
        query.country_code,
        coordinates.latitude,
        coordinates.longitude,
        capacity_kw,
    )
    return bundle
