"""Shared fixtures: route document factories and a fake HTTP client."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

import pytest

from geo_services.contracts.route_contract import Coordinate, Leg, Maneuver, RouteDocument


# --- Factory helpers -------------------------------------------------
def make_route(steps: Sequence[Tuple[float, Tuple[float, float]]], total: float) -> RouteDocument:
    """``steps`` is ``[(distance, (lat, lng)), ...]`` for a single-leg route."""
    maneuvers = [Maneuver(distance=d, start_point=Coordinate(lat=p[0], lng=p[1])) for d, p in steps]
    return RouteDocument(total_distance=total, legs=[Leg(maneuvers=maneuvers)])


def mapquest_route_json(statuscode: int = 0) -> Dict[str, Any]:
    return {
        "info": {"statuscode": statuscode, "messages": [] if statuscode == 0 else ["Bad key"]},
        "route": {
            "hasTollRoad": False,
            "hasCountryCross": False,
            "hasFerry": True,
            "distance": 20.0,
            "fuelUsed": 0.9,
            "formattedTime": "00:25:00",
            "legs": [
                {
                    "maneuvers": [
                        {
                            "narrative": "Start out going north on Main St.",
                            "turnType": 0,
                            "transportMode": "AUTO",
                            "mapUrl": "http://maps.example/1",
                            "iconUrl": "http://icons.example/1",
                            "distance": 10.0,
                            "formattedTime": "00:12:00",
                            "directionName": "North",
                            "startPoint": {"lat": 0.0, "lng": 0.0},
                        },
                        {
                            "narrative": "Turn left onto 2nd Ave.",
                            "turnType": 6,
                            "transportMode": "AUTO",
                            "mapUrl": "http://maps.example/2",
                            "iconUrl": "http://icons.example/2",
                            "distance": 10.0,
                            "formattedTime": "00:13:00",
                            "startPoint": {"lat": 10.0, "lng": 0.0},
                        },
                        {
                            "narrative": "Welcome to your destination.",
                            "turnType": -1,
                            "transportMode": "AUTO",
                            "mapUrl": "http://maps.example/3",
                            "iconUrl": "http://icons.example/3",
                            "distance": 0.0,
                            "formattedTime": "00:00:00",
                            "startPoint": {"lat": 20.0, "lng": 0.0},
                        },
                    ]
                }
            ],
        },
    }


def geocode_json(location: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    return {
        "info": {"statuscode": 0, "messages": []},
        "results": [{"locations": [location] if location else []}],
    }


class FakeHTTP:
    """Stands in for HTTPClient: returns queued payloads and records calls."""

    def __init__(self, *payloads: Dict[str, Any]):
        self.payloads: List[Dict[str, Any]] = list(payloads)
        self.calls: List[Dict[str, Any]] = []

    def get_json(self, url, params=None, headers=None, timeout_s=None, raise_for_status=True):
        self.calls.append(
            {"url": url, "params": params or {}, "headers": headers or {}, "raise_for_status": raise_for_status}
        )
        payload = self.payloads.pop(0)
        if isinstance(payload, Exception):
            raise payload
        return payload


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def two_step_route():
    return make_route([(10, (0, 0)), (10, (10, 0))], total=20)
