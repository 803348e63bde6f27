"""
API route for the full solar yield pipeline.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from pvyield.api.deps import get_geocoder, get_nrel_proxy
from pvyield.config import GENERIC_ERROR_MESSAGE
from pvyield.engine.geocoder import PostalGeocoder
from pvyield.engine.nrel_proxy import NRELProxy
from pvyield.engine.pipeline import run_pipeline
from pvyield.errors import RetrievalError, UnresolvableLocation
from pvyield.models.geocode import PostalQuery
from pvyield.models.solar_yield import SolarYieldInput, YieldBundle

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["solar-yield"])


@router.post("/solar-yield", response_model=YieldBundle)
def compute_solar_yield(
    data: SolarYieldInput,
    geocoder: PostalGeocoder = Depends(get_geocoder),
    proxy: NRELProxy = Depends(get_nrel_proxy),
) -> YieldBundle:
    """
    Resolve the postal code, simulate a reference system there and rescale
    the result to `capacity_kw`.

    Returns hourly, first-day, monthly, annual and daily-average views.
    """
    query = PostalQuery(postal_code=data.postal_code, country_code=data.country_code)
    try:
        return run_pipeline(query, data.capacity_kw, geocoder, proxy)
    except UnresolvableLocation as e:
        logger.warning("Solar yield: %s", e)
        raise HTTPException(status_code=404, detail=GENERIC_ERROR_MESSAGE)
    except RetrievalError as e:
        logger.warning(
            "Solar yield retrieval failed for %s/%s (%s): %s",
            data.postal_code,
            data.country_code,
            type(e).__name__,
            e,
        )
        raise HTTPException(status_code=502, detail=GENERIC_ERROR_MESSAGE)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
