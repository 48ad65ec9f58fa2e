from __future__ import annotations

from abc import ABC, abstractmethod

from geo_services.contracts.route_contract import Coordinate, RouteDocument
from geo_services.core.models import Direction, RouteSummary


class RouteProvider(ABC):
    """Fetch a route document between two coordinates."""

    @abstractmethod
    def fetch_route(self, origin: Coordinate, destination: Coordinate) -> RouteDocument:
        raise NotImplementedError

    def fetch_summary(self, origin: Coordinate, destination: Coordinate) -> RouteSummary:
        """Narrative route. Providers without turn-by-turn text derive it from geometry."""
        route = self.fetch_route(origin, destination)
        summary = RouteSummary(distance=route.total_distance)
        if route.legs:
            maneuvers = route.legs[0].maneuvers
            summary.directions = [
                Direction(
                    narrative=f"Head to {m.start_point.lat:.5f},{m.start_point.lng:.5f}",
                    distance=m.distance,
                    turn_type="end" if i == len(maneuvers) - 1 else "straight",
                )
                for i, m in enumerate(maneuvers)
            ]
        return summary
