"""Request parameter parsing: coordinate strings and lat/lng pairs."""
from __future__ import annotations

import math
from typing import Optional, Tuple

from geo_services.contracts.route_contract import Coordinate
from geo_services.errors import ErrorId, ParameterError


def _to_float(text: str) -> Optional[float]:
    """Finite float or None; nan / inf parse but are not usable positions."""
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_lat_lng_pair(value: Optional[str], field: str) -> Coordinate:
    """
    Parse a ``"lat,lng"`` string.

    ``None`` is a missing parameter; a missing comma, an empty side or extra
    components are invalid; sides that are not numbers are badly formatted.
    """
    if value is None:
        raise ParameterError(ErrorId.MISSING_PARAMETER, field)
    if "," not in value or value.startswith(",") or value.endswith(","):
        raise ParameterError(ErrorId.INVALID_PARAMETER, field)

    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ParameterError(ErrorId.INVALID_PARAMETER, field)

    lat = _to_float(parts[0])
    lng = _to_float(parts[1])
    if lat is None or lng is None:
        raise ParameterError(ErrorId.INVALID_FORMAT, field)
    return Coordinate(lat=lat, lng=lng)


def parse_lat_lng(
    lat: Optional[str],
    lng: Optional[str],
    bad_number: ErrorId = ErrorId.INVALID_PARAMETER,
) -> Coordinate:
    """Parse separate ``lat`` / ``lng`` values; *bad_number* is the id for non-numeric input."""
    if lat is None:
        raise ParameterError(ErrorId.MISSING_PARAMETER, "lat")
    if lng is None:
        raise ParameterError(ErrorId.MISSING_PARAMETER, "lng")
    if not lat.strip():
        raise ParameterError(ErrorId.INVALID_PARAMETER, "lat")
    if not lng.strip():
        raise ParameterError(ErrorId.INVALID_PARAMETER, "lng")

    latd = _to_float(lat)
    if latd is None:
        raise ParameterError(bad_number, "lat")
    lngd = _to_float(lng)
    if lngd is None:
        raise ParameterError(bad_number, "lng")
    return Coordinate(lat=latd, lng=lngd)


def require_text(value: Optional[str], field: str) -> str:
    if value is None or not value.strip():
        raise ParameterError(ErrorId.MISSING_PARAMETER, field)
    return value.strip()


def parse_endpoints(source: Optional[str], destination: Optional[str]) -> Tuple[Coordinate, Coordinate]:
    """
    Parse a ``source`` / ``destination`` pair of ``"lat,lng"`` strings.

    Presence of both is checked before either is parsed, so a missing
    destination is reported ahead of a malformed source.
    """
    if source is None:
        raise ParameterError(ErrorId.MISSING_PARAMETER, "source")
    if destination is None:
        raise ParameterError(ErrorId.MISSING_PARAMETER, "destination")
    return parse_lat_lng_pair(source, "source"), parse_lat_lng_pair(destination, "destination")
