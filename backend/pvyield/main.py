"""
PV Yield App: FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pvyield.api.router import router
from pvyield.config import load_settings
from pvyield.engine.geocoder import PostalGeocoder
from pvyield.engine.nrel_proxy import NRELProxy
from pvyield.errors import ConfigurationError

logger = logging.getLogger(__name__)

load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Fail at startup, not per request, when the API key is missing
    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error("Startup aborted: %s", e)
        raise

    app.state.geocoder = PostalGeocoder(
        url=settings.postal_lookup_url, timeout=settings.http_timeout
    )
    app.state.nrel_proxy = NRELProxy(
        api_key=settings.nrel_api_key,
        url=settings.pvwatts_url,
        timeout=settings.http_timeout,
    )
    yield


app = FastAPI(
    title="PV Yield API",
    description="Postal-code based photovoltaic yield estimates from NREL PVWatts",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS: allow local frontend dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",  # Vite default
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "pv-yield-app"}
