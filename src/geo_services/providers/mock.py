from __future__ import annotations

from math import atan2, cos, radians, sin, sqrt

from geo_services.contracts.route_contract import Coordinate, Leg, Maneuver, RouteDocument
from geo_services.providers.base import RouteProvider


def _haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in kilometres between two WGS-84 points."""
    R = 6_371.0  # Earth radius in km
    lat1r, lon1r, lat2r, lon2r = map(radians, [a.lat, a.lng, b.lat, b.lng])
    dlat = lat2r - lat1r
    dlon = lon2r - lon1r
    h = sin(dlat / 2) ** 2 + cos(lat1r) * cos(lat2r) * sin(dlon / 2) ** 2
    return R * 2 * atan2(sqrt(h), sqrt(1 - h))


class MockRouteProvider(RouteProvider):
    """
    Deterministic fake routes so the pipeline runs end-to-end without APIs.

    The route is the straight line origin -> destination cut into ``segments``
    equal maneuvers, followed by a zero-length arrival maneuver at the
    destination (the same shape MapQuest uses for its last step).
    """

    def __init__(self, segments: int = 4):
        if segments < 1:
            raise ValueError("segments must be >= 1")
        self.segments = segments

    def fetch_route(self, origin: Coordinate, destination: Coordinate) -> RouteDocument:
        total = _haversine_km(origin, destination)
        step = total / self.segments

        maneuvers = []
        for i in range(self.segments):
            u = i / self.segments
            start = Coordinate(
                lat=origin.lat + u * (destination.lat - origin.lat),
                lng=origin.lng + u * (destination.lng - origin.lng),
            )
            maneuvers.append(Maneuver(distance=step, start_point=start))
        maneuvers.append(Maneuver(distance=0.0, start_point=destination))

        return RouteDocument(total_distance=step * self.segments, legs=[Leg(maneuvers=maneuvers)])
