# path: geo-services/src/geo_services/contracts/route_contract.py

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple


class EmptyRouteError(ValueError):
    """Raised when a route document carries no legs."""


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lng: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.lat) and math.isfinite(self.lng)):
            raise ValueError(f"Coordinate must be finite: ({self.lat}, {self.lng})")

    def as_dict(self) -> dict:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class Maneuver:
    # length of the segment from start_point to the next maneuver's start_point
    distance: float
    start_point: Coordinate

    def __post_init__(self) -> None:
        if not math.isfinite(self.distance) or self.distance < 0:
            raise ValueError(f"Maneuver distance must be >= 0, got {self.distance}")


@dataclass(frozen=True)
class Leg:
    maneuvers: Tuple[Maneuver, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # accept any iterable, keep provider order
        object.__setattr__(self, "maneuvers", tuple(self.maneuvers))


@dataclass(frozen=True)
class RouteDocument:
    total_distance: float
    legs: Tuple[Leg, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not math.isfinite(self.total_distance) or self.total_distance < 0:
            raise ValueError(f"Route distance must be >= 0, got {self.total_distance}")
        object.__setattr__(self, "legs", tuple(self.legs))

    def first_leg(self) -> Leg:
        if not self.legs:
            raise EmptyRouteError("Route document has no legs")
        return self.legs[0]
