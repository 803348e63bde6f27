"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from pvyield.api.geocode import router as geocode_router
from pvyield.api.nrel import router as nrel_router
from pvyield.api.solar_yield import router as solar_yield_router

router = APIRouter()
router.include_router(geocode_router)
router.include_router(nrel_router)
router.include_router(solar_yield_router)
