"""Directions endpoints: route summary and route midpoint."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from geo_services.deps import get_services, respond
from geo_services.providers.factory import Services

router = APIRouter(prefix="/directions", tags=["directions"])


@router.get("/route")
def route(
    source: Optional[str] = Query(None, description="Origin as 'lat,lng'"),
    destination: Optional[str] = Query(None, description="Destination as 'lat,lng'"),
    services: Services = Depends(get_services),
):
    return respond(services.directions.get_route(source, destination))


@router.get("/midpoint")
def midpoint(
    source: Optional[str] = Query(None, description="Origin as 'lat,lng'"),
    destination: Optional[str] = Query(None, description="Destination as 'lat,lng'"),
    services: Services = Depends(get_services),
):
    return respond(services.directions.get_midpoint(source, destination))
