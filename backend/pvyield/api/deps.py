"""
Request-scoped access to the upstream clients built at startup.
"""

from fastapi import Request

from pvyield.engine.geocoder import PostalGeocoder
from pvyield.engine.nrel_proxy import NRELProxy


def get_geocoder(request: Request) -> PostalGeocoder:
    return request.app.state.geocoder


def get_nrel_proxy(request: Request) -> NRELProxy:
    return request.app.state.nrel_proxy
