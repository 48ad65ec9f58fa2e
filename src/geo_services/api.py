"""FastAPI REST backend for the geo-services aggregator."""
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geo_services.config import settings
from geo_services.routers import directions, location, places

app = FastAPI(title="Geo Services", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Include routers
# ---------------------------------------------------------------------------
app.include_router(directions.router)
app.include_router(location.router)
app.include_router(places.router)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/health")
def health():
    return {
        "status": "ok",
        "route_provider": settings.route_provider,
        "mapquest": bool(settings.mapquest_api_key),
        "yelp": bool(settings.yelp_api_key),
    }
