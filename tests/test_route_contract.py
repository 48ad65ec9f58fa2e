from __future__ import annotations

import dataclasses
import math

import pytest

from geo_services.contracts.route_contract import Coordinate, EmptyRouteError, Leg, Maneuver, RouteDocument


def test_first_leg_requires_a_leg():
    with pytest.raises(EmptyRouteError):
        RouteDocument(total_distance=5.0).first_leg()


def test_legs_and_maneuvers_are_tuples_in_given_order():
    steps = [Maneuver(distance=float(i), start_point=Coordinate(lat=i, lng=-i)) for i in range(3)]
    route = RouteDocument(total_distance=3.0, legs=[Leg(maneuvers=iter(steps))])
    assert isinstance(route.legs, tuple)
    assert route.first_leg().maneuvers == tuple(steps)


def test_route_is_immutable():
    route = RouteDocument(total_distance=1.0, legs=[Leg()])
    with pytest.raises(dataclasses.FrozenInstanceError):
        route.total_distance = 2.0


@pytest.mark.parametrize("distance", [-1.0, math.inf, math.nan])
def test_maneuver_distance_must_be_non_negative_and_finite(distance):
    with pytest.raises(ValueError):
        Maneuver(distance=distance, start_point=Coordinate(lat=0, lng=0))


def test_route_distance_must_be_non_negative():
    with pytest.raises(ValueError):
        RouteDocument(total_distance=-0.5)


def test_coordinate_rejects_non_finite_values():
    with pytest.raises(ValueError):
        Coordinate(lat=math.nan, lng=0.0)
    assert Coordinate(lat=1.5, lng=-2.5).as_dict() == {"lat": 1.5, "lng": -2.5}
