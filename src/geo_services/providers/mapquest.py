from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from geo_services.contracts.route_contract import Coordinate, Leg, Maneuver, RouteDocument
from geo_services.core.models import Address, Direction, RouteSummary
from geo_services.errors import ProviderError
from geo_services.providers.base import RouteProvider
from geo_services.providers.http import HTTPClient

log = logging.getLogger(__name__)

PROVIDER = "mapquest"

# MapQuest turnType codes 0..23; -1 marks the arrival maneuver
TURN_TYPES = (
    "straight", "slight right", "right", "sharp right", "reverse", "sharp left",
    "left", "slight left", "right u-turn", "left u-turn", "right merge", "left merge",
    "right on ramp", "left on ramp", "right off ramp", "left off ramp", "right fork",
    "left fork", "straight fork", "take transit", "transfer transit", "port transit",
    "enter transit", "exit transit",
)


def _fmt(c: Coordinate) -> str:
    return f"{c.lat},{c.lng}"


def _turn_type_name(code: Any) -> str:
    try:
        code = int(code)
    except (TypeError, ValueError):
        return "unknown"
    if code == -1:
        return "end"
    if 0 <= code < len(TURN_TYPES):
        return TURN_TYPES[code]
    return "unknown"


def _check_status(data: Dict[str, Any]) -> Dict[str, Any]:
    """MapQuest reports failures in ``info.statuscode`` with HTTP 200."""
    info = data.get("info") or {}
    status = info.get("statuscode")
    if status != 0:
        messages = info.get("messages") or []
        raise ProviderError(PROVIDER, "; ".join(str(m) for m in messages) or "request rejected", status=status)
    return data


def _coordinate(obj: Dict[str, Any]) -> Coordinate:
    return Coordinate(lat=float(obj["lat"]), lng=float(obj["lng"]))


# ---------------------------------------------------------------------------
# Response parsing
# ---------------------------------------------------------------------------

def route_document_from_json(route: Dict[str, Any]) -> RouteDocument:
    """Build a RouteDocument from the ``route`` object of a directions response."""
    try:
        legs = []
        for leg in route.get("legs") or []:
            maneuvers = [
                Maneuver(distance=float(m["distance"]), start_point=_coordinate(m["startPoint"]))
                for m in leg.get("maneuvers") or []
            ]
            legs.append(Leg(maneuvers=maneuvers))
        return RouteDocument(total_distance=float(route["distance"]), legs=legs)
    except (KeyError, TypeError, ValueError) as e:
        raise ProviderError(PROVIDER, f"malformed route: {type(e).__name__}: {e}")


def route_summary_from_json(route: Dict[str, Any]) -> RouteSummary:
    """Narrative route: headline flags plus turn-by-turn directions of the first leg."""
    try:
        summary = RouteSummary(
            has_toll_road=bool(route.get("hasTollRoad", False)),
            has_country_cross=bool(route.get("hasCountryCross", False)),
            has_ferry=bool(route.get("hasFerry", False)),
            distance=float(route["distance"]),
            fuel_used=float(route.get("fuelUsed") or 0.0),
            formatted_time=str(route.get("formattedTime", "")),
        )

        legs = route.get("legs") or []
        if legs:
            maneuvers = legs[0].get("maneuvers") or []
            directions: List[Direction] = []
            for i, m in enumerate(maneuvers):
                last = i == len(maneuvers) - 1
                directions.append(
                    Direction(
                        narrative=str(m.get("narrative", "")),
                        url="" if last else str(m.get("mapUrl", "")),
                        distance=float(m.get("distance") or 0.0),
                        time=str(m.get("formattedTime", "")),
                        turn_type=_turn_type_name(m.get("turnType")),
                        transport_mode=str(m.get("transportMode", "")),
                        direction=str(m.get("directionName", "")),
                        icon_url=str(m.get("iconUrl", "")),
                    )
                )
            summary.directions = directions
        return summary
    except (KeyError, TypeError, ValueError) as e:
        raise ProviderError(PROVIDER, f"malformed route: {type(e).__name__}: {e}")


def _first_location(data: Dict[str, Any]) -> Dict[str, Any]:
    results = data.get("results") or []
    locations = (results[0].get("locations") or []) if results else []
    if not locations:
        raise ProviderError(PROVIDER, "no matching location")
    return locations[0]


# ---------------------------------------------------------------------------
# Providers
# ---------------------------------------------------------------------------

@dataclass
class MapQuestDirections(RouteProvider):
    """
    MapQuest Directions API v2.

    Every request asks for the fastest route and avoids toll roads.
    ``fetch_route`` uses kilometres; ``fetch_summary`` keeps the API default (miles).
    """

    api_key: str
    base_url: str = "https://www.mapquestapi.com"
    user_agent: str = "geo-services/0.1.0"
    http: Optional[HTTPClient] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.http is None:
            self.http = HTTPClient(user_agent=self.user_agent)

    def _route_json(self, origin: Coordinate, destination: Coordinate, unit: Optional[str] = None) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "key": self.api_key,
            "from": _fmt(origin),
            "to": _fmt(destination),
            "routeType": "fastest",
            "avoids": "Toll Road",
        }
        if unit:
            params["unit"] = unit

        log.debug("MapQuest route %s -> %s (unit=%s)", _fmt(origin), _fmt(destination), unit or "m")
        data = _check_status(self.http.get_json(f"{self.base_url}/directions/v2/route", params=params))
        route = data.get("route")
        if not isinstance(route, dict):
            raise ProviderError(PROVIDER, "response has no route")
        return route

    def fetch_route(self, origin: Coordinate, destination: Coordinate) -> RouteDocument:
        return route_document_from_json(self._route_json(origin, destination, unit="k"))

    def fetch_summary(self, origin: Coordinate, destination: Coordinate) -> RouteSummary:
        return route_summary_from_json(self._route_json(origin, destination))


@dataclass
class MapQuestGeocoder:
    """MapQuest Geocoding API v1: forward (free-form or components) and reverse."""

    api_key: str
    base_url: str = "https://www.mapquestapi.com"
    user_agent: str = "geo-services/0.1.0"
    http: Optional[HTTPClient] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.http is None:
            self.http = HTTPClient(user_agent=self.user_agent)

    def _geocode(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        data = self.http.get_json(f"{self.base_url}/geocoding/v1/{path}", params={"key": self.api_key, **params})
        return _first_location(_check_status(data))

    def geocode_address(self, address: str) -> Coordinate:
        location = self._geocode("address", {"location": address})
        try:
            return _coordinate(location["latLng"])
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError(PROVIDER, f"malformed location: {e}")

    def geocode_components(
        self,
        street: str = "",
        city: str = "",
        state: str = "",
        postal_code: str = "",
    ) -> Coordinate:
        params = {"street": street, "city": city, "state": state, "postalCode": postal_code}
        location = self._geocode("address", {k: v for k, v in params.items() if v})
        try:
            return _coordinate(location["latLng"])
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError(PROVIDER, f"malformed location: {e}")

    def reverse(self, point: Coordinate) -> Address:
        location = self._geocode("reverse", {"location": _fmt(point)})
        return Address(
            street=location.get("street") or "",
            city=location.get("adminArea5") or "",
            state=location.get("adminArea3") or "",
            country=location.get("adminArea1") or "",
            postal_code=location.get("postalCode") or "",
        )
