"""
API route for postal-code geocoding.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from pvyield.api.deps import get_geocoder
from pvyield.config import GENERIC_ERROR_MESSAGE
from pvyield.engine.geocoder import PostalGeocoder
from pvyield.models.geocode import Coordinates

router = APIRouter(prefix="/api/v1", tags=["geocode"])


@router.get("/geocode", response_model=Coordinates)
def geocode(
    postal_code: str = Query(..., min_length=1),
    country_code: str = Query(..., min_length=1),
    geocoder: PostalGeocoder = Depends(get_geocoder),
) -> Coordinates:
    """Resolve a postal code to latitude/longitude (first match only)."""
    coordinates = geocoder.resolve(postal_code, country_code)
    if coordinates is None:
        raise HTTPException(status_code=404, detail=GENERIC_ERROR_MESSAGE)
    return coordinates
