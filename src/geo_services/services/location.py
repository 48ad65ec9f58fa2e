"""Geocoding: address to coordinates and coordinates to address."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from geo_services.core.validation import parse_lat_lng, require_text
from geo_services.errors import ErrorId, ParameterError, ProviderError, generic_error
from geo_services.providers.mapquest import MapQuestGeocoder

log = logging.getLogger(__name__)


class LocationService:
    def __init__(self, geocoder: MapQuestGeocoder):
        self.geocoder = geocoder

    def get_coordinates_using_address(self, address: Optional[str]) -> Dict[str, Any]:
        try:
            text = require_text(address, "address")
        except ParameterError as e:
            return e.envelope()

        try:
            point = self.geocoder.geocode_address(text)
        except (ProviderError, requests.RequestException) as e:
            log.warning("Geocoding failed for %r: %s", text, e)
            return generic_error()
        return {"location": point.as_dict()}

    def get_coordinates_using_components(
        self,
        street: Optional[str] = None,
        city: Optional[str] = None,
        state: Optional[str] = None,
        postal_code: Optional[str] = None,
    ) -> Dict[str, Any]:
        parts = [(p or "").strip() for p in (street, city, state, postal_code)]
        if not any(parts):
            return ParameterError(ErrorId.MISSING_PARAMETER, "address").envelope()

        try:
            point = self.geocoder.geocode_components(*parts)
        except (ProviderError, requests.RequestException) as e:
            log.warning("Component geocoding failed for %s: %s", parts, e)
            return generic_error()
        return {"location": point.as_dict()}

    def get_address(self, lat: Optional[str], lng: Optional[str]) -> Dict[str, Any]:
        try:
            point = parse_lat_lng(lat, lng, bad_number=ErrorId.INVALID_PARAMETER)
        except ParameterError as e:
            return e.envelope()

        try:
            address = self.geocoder.reverse(point)
        except (ProviderError, requests.RequestException) as e:
            log.warning("Reverse geocoding failed for %s,%s: %s", lat, lng, e)
            return generic_error()

        return {
            "address": address.model_dump(by_alias=True),
            "providedLocation": point.as_dict(),
        }
