"""Route midpoint: locate the coordinate at half the total route distance."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple, Union

from geo_services.contracts.route_contract import Coordinate, Maneuver, RouteDocument


class MidpointErrorKind(str, Enum):
    NO_ROUTE_GEOMETRY = "no_route_geometry"
    INSUFFICIENT_ROUTE_LENGTH = "insufficient_route_length"


@dataclass(frozen=True)
class MidpointError:
    kind: MidpointErrorKind
    detail: str = ""


MidpointResult = Union[Coordinate, MidpointError]


# ---------------------------------------------------------------------------
# Geo helpers
# ---------------------------------------------------------------------------

def _interpolate_point(start: Coordinate, end: Coordinate, frac: float) -> Coordinate:
    """Linear interpolation between two coordinates, each axis independently."""
    lat = start.lat + (end.lat - start.lat) * frac
    lng = start.lng + (end.lng - start.lng) * frac
    return Coordinate(lat=lat, lng=lng)


def _scan_to_target(
    maneuvers: Sequence[Maneuver], target: float
) -> Tuple[int, Coordinate, float, float]:
    """
    Walk maneuvers accumulating distance until the running total reaches *target*.

    Returns ``(i, segment_start, low_bound, accumulated)`` where ``i`` is the
    number of maneuvers consumed, ``segment_start`` the start point of the last
    consumed maneuver and ``low_bound`` the running total before its distance
    was added.
    """
    segment_start = maneuvers[0].start_point
    low_bound = 0.0
    accumulated = 0.0
    i = 0
    while i < len(maneuvers) and accumulated < target:
        maneuver = maneuvers[i]
        segment_start = maneuver.start_point
        low_bound = accumulated
        accumulated += maneuver.distance
        i += 1
    return i, segment_start, low_bound, accumulated


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def find_midpoint(route: RouteDocument) -> MidpointResult:
    """
    Coordinate lying at ``total_distance / 2`` along the first leg.

    A maneuver's ``distance`` belongs to the segment that starts at its own
    start point and ends at the next maneuver's start point, so the window is
    bracketed by the last consumed maneuver's start and the start of the one
    after it (or the last maneuver's start when the scan runs off the end).

    Parameters
    ----------
    route : RouteDocument
        Parsed provider route. Only the first leg is used.

    Returns
    -------
    Coordinate or MidpointError
        ``MidpointError`` with ``NO_ROUTE_GEOMETRY`` when the first leg is
        missing or empty, ``INSUFFICIENT_ROUTE_LENGTH`` when the maneuvers
        do not cover half of ``total_distance``. Never raises for either.
    """
    target = route.total_distance / 2.0

    if not route.legs:
        return MidpointError(MidpointErrorKind.NO_ROUTE_GEOMETRY, "route has no legs")
    maneuvers = route.first_leg().maneuvers
    if not maneuvers:
        return MidpointError(MidpointErrorKind.NO_ROUTE_GEOMETRY, "first leg has no maneuvers")

    i, segment_start, low_bound, accumulated = _scan_to_target(maneuvers, target)

    # Only reachable when every maneuver was consumed; do not extrapolate.
    if accumulated < target:
        return MidpointError(
            MidpointErrorKind.INSUFFICIENT_ROUTE_LENGTH,
            f"maneuvers cover {accumulated} of required {target}",
        )

    end_point = maneuvers[min(i, len(maneuvers) - 1)].start_point

    span = accumulated - low_bound
    if span == 0:
        return segment_start

    m = (target - low_bound) / span
    return _interpolate_point(segment_start, end_point, m)
