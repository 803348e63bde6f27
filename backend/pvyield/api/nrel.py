"""
API route for the NREL PVWatts proxy.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from pvyield.api.deps import get_nrel_proxy
from pvyield.config import PROXY_ERROR_MESSAGE
from pvyield.engine.nrel_proxy import NRELProxy
from pvyield.errors import UpstreamUnavailable
from pvyield.models.solar_yield import NRELProxyInput

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["nrel"])


@router.post("/nrel")
def relay_pvwatts(
    body: NRELProxyInput,
    proxy: NRELProxy = Depends(get_nrel_proxy),
) -> JSONResponse:
    """
    Forward lat/long to PVWatts and relay its JSON body verbatim.

    Any failure yields {"error": ...} with HTTP 500.
    """
    try:
        data = proxy.fetch(body.lat, body.long)
    except UpstreamUnavailable as e:
        logger.warning("NREL proxy failure for (%s, %s): %s", body.lat, body.long, e)
        return JSONResponse({"error": PROXY_ERROR_MESSAGE}, status_code=500)
    return JSONResponse(data)
