"""Places: businesses around a coordinate, each with a resolved position."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from geo_services.core.models import Venue
from geo_services.core.validation import parse_lat_lng
from geo_services.errors import ErrorId, LocationUnavailableError, ParameterError, ProviderError, generic_error
from geo_services.providers.mapquest import MapQuestGeocoder
from geo_services.providers.yelp import YelpPlaces

log = logging.getLogger(__name__)


class PlacesService:
    def __init__(self, places: YelpPlaces, geocoder: MapQuestGeocoder):
        self.places = places
        self.geocoder = geocoder

    def _locate(self, venue: Venue) -> Venue:
        """Fill lat/lng from the address when the business record has none."""
        if venue.lat is not None and venue.lng is not None:
            return venue
        point = self.geocoder.geocode_components(venue.address, venue.city, venue.state, venue.postal_code)
        return venue.model_copy(update={"lat": point.lat, "lng": point.lng})

    def get_venues(self, lat: Optional[str], lng: Optional[str]) -> Dict[str, Any]:
        try:
            point = parse_lat_lng(lat, lng, bad_number=ErrorId.INVALID_FORMAT)
        except ParameterError as e:
            return e.envelope()

        try:
            venues: List[Venue] = [self._locate(v) for v in self.places.search(point)]
        except LocationUnavailableError as e:
            log.info("Places unavailable near %s,%s: %s", lat, lng, e.detail)
            return e.envelope()
        except (ProviderError, requests.RequestException) as e:
            log.warning("Places lookup failed near %s,%s: %s", lat, lng, e)
            return generic_error()

        return {"result": [v.to_wire() for v in venues]}
