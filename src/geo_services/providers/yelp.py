from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from geo_services.contracts.route_contract import Coordinate
from geo_services.core.models import Venue
from geo_services.errors import LocationUnavailableError, ProviderError
from geo_services.providers.http import HTTPClient

log = logging.getLogger(__name__)

PROVIDER = "yelp"

# Yelp error codes meaning "no coverage here" rather than a failed request
_UNAVAILABLE_CODES = {"UNAVAILABLE_FOR_LOCATION", "LOCATION_NOT_FOUND"}


def _opt_float(v: Any) -> Optional[float]:
    if v is None:
        return None
    try:
        return float(v)
    except (TypeError, ValueError):
        return None


def venue_from_business(business: Dict[str, Any]) -> Venue:
    """Map one Yelp business record onto a Venue; absent fields keep their defaults."""
    location = business.get("location") or {}
    coords = business.get("coordinates") or {}

    street = location.get("address1") or ""
    if not street:
        display = location.get("display_address") or []
        street = display[0] if display else ""

    distance = _opt_float(business.get("distance"))
    return Venue(
        name=str(business.get("name", "")),
        address=street,
        city=location.get("city") or "",
        state=location.get("state") or "",
        postal_code=location.get("zip_code") or "",
        country=location.get("country") or "",
        distance=distance if distance is not None else -1,
        formatted_phone=business.get("display_phone") or "",
        lat=_opt_float(coords.get("latitude")),
        lng=_opt_float(coords.get("longitude")),
    )


@dataclass
class YelpPlaces:
    """
    Yelp Fusion business search around a coordinate.

    Error payloads come back with 4xx status, so the body is read without
    ``raise_for_status`` and classified here.
    """

    api_key: str
    base_url: str = "https://api.yelp.com/v3"
    term: str = "restaurants"
    limit: int = 20
    user_agent: str = "geo-services/0.1.0"
    http: Optional[HTTPClient] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.http is None:
            self.http = HTTPClient(user_agent=self.user_agent)

    def search(self, point: Coordinate) -> List[Venue]:
        params = {
            "term": self.term,
            "latitude": point.lat,
            "longitude": point.lng,
            "limit": self.limit,
        }
        data = self.http.get_json(
            f"{self.base_url}/businesses/search",
            params=params,
            headers={"Authorization": f"Bearer {self.api_key}"},
            raise_for_status=False,
        )

        businesses = data.get("businesses")
        if isinstance(businesses, list):
            log.debug("Yelp returned %d businesses near %s,%s", len(businesses), point.lat, point.lng)
            return [venue_from_business(b) for b in businesses]

        error = data.get("error") or {}
        code = str(error.get("code") or error.get("id") or "")
        description = str(error.get("description") or error.get("text") or "")
        if code.upper() in _UNAVAILABLE_CODES:
            raise LocationUnavailableError(PROVIDER, description or "Location is not supported")
        raise ProviderError(PROVIDER, f"{code or 'unknown error'}: {description}")
