"""Places search endpoint."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from geo_services.deps import get_services, respond
from geo_services.providers.factory import Services

router = APIRouter(prefix="/places", tags=["places"])


@router.get("/venues")
def venues(
    lat: Optional[str] = None,
    lng: Optional[str] = None,
    services: Services = Depends(get_services),
):
    return respond(services.places.get_venues(lat, lng))
