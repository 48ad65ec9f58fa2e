"""Geocoding endpoints."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from geo_services.deps import get_services, respond
from geo_services.providers.factory import Services

router = APIRouter(prefix="/location", tags=["location"])


@router.get("/address")
def coordinates_for_address(
    address: Optional[str] = None,
    services: Services = Depends(get_services),
):
    return respond(services.location.get_coordinates_using_address(address))


@router.get("/components")
def coordinates_for_components(
    street: Optional[str] = None,
    city: Optional[str] = None,
    state: Optional[str] = None,
    postal_code: Optional[str] = Query(None, alias="postalCode"),
    services: Services = Depends(get_services),
):
    return respond(services.location.get_coordinates_using_components(street, city, state, postal_code))


@router.get("/reverse")
def address_for_coordinates(
    lat: Optional[str] = None,
    lng: Optional[str] = None,
    services: Services = Depends(get_services),
):
    return respond(services.location.get_address(lat, lng))
