from __future__ import annotations

import pytest

from geo_services.contracts.route_contract import Coordinate
from geo_services.core.validation import parse_endpoints, parse_lat_lng, parse_lat_lng_pair, require_text
from geo_services.errors import ErrorId, ParameterError


def test_pair_parses_and_strips():
    assert parse_lat_lng_pair(" 37.5 , -122.25 ", "source") == Coordinate(lat=37.5, lng=-122.25)


@pytest.mark.parametrize(
    "value, error_id",
    [
        (None, ErrorId.MISSING_PARAMETER),
        ("37.5", ErrorId.INVALID_PARAMETER),
        (",-122.25", ErrorId.INVALID_PARAMETER),
        ("37.5,", ErrorId.INVALID_PARAMETER),
        (" ,-122.25", ErrorId.INVALID_PARAMETER),
        ("1,2,3", ErrorId.INVALID_PARAMETER),
        ("north,west", ErrorId.INVALID_FORMAT),
        ("nan,1", ErrorId.INVALID_FORMAT),
    ],
)
def test_pair_errors(value, error_id):
    with pytest.raises(ParameterError) as exc:
        parse_lat_lng_pair(value, "destination")
    assert exc.value.error_id is error_id
    assert exc.value.field == "destination"


def test_pair_error_envelope_shape():
    with pytest.raises(ParameterError) as exc:
        parse_lat_lng_pair(None, "source")
    assert exc.value.envelope() == {
        "error": {
            "message": "One or more parameters are missing in request.",
            "id": "MISSING_PARAMETER",
            "field": "source",
        }
    }


@pytest.mark.parametrize(
    "lat, lng, field, error_id",
    [
        (None, "1", "lat", ErrorId.MISSING_PARAMETER),
        ("1", None, "lng", ErrorId.MISSING_PARAMETER),
        ("", "1", "lat", ErrorId.INVALID_PARAMETER),
        ("1", " ", "lng", ErrorId.INVALID_PARAMETER),
        ("abc", "1", "lat", ErrorId.INVALID_FORMAT),
        ("1", "abc", "lng", ErrorId.INVALID_FORMAT),
    ],
)
def test_separate_values_errors(lat, lng, field, error_id):
    with pytest.raises(ParameterError) as exc:
        parse_lat_lng(lat, lng, bad_number=ErrorId.INVALID_FORMAT)
    assert exc.value.error_id is error_id
    assert exc.value.field == field


def test_separate_values_default_bad_number_is_invalid_parameter():
    with pytest.raises(ParameterError) as exc:
        parse_lat_lng("12x", "1")
    assert exc.value.error_id is ErrorId.INVALID_PARAMETER
    assert parse_lat_lng("12", "-3.5") == Coordinate(lat=12.0, lng=-3.5)


def test_require_text():
    assert require_text("  1600 Pennsylvania Ave ", "address") == "1600 Pennsylvania Ave"
    with pytest.raises(ParameterError):
        require_text("   ", "address")


@pytest.mark.parametrize(
    "lat, lng, field",
    [("inf", "1", "lat"), ("1", "inf", "lng"), ("1", "nan", "lng")],
)
def test_non_finite_values_blame_their_own_field(lat, lng, field):
    with pytest.raises(ParameterError) as exc:
        parse_lat_lng(lat, lng, bad_number=ErrorId.INVALID_FORMAT)
    assert exc.value.error_id is ErrorId.INVALID_FORMAT
    assert exc.value.field == field


def test_endpoints_check_presence_before_format():
    with pytest.raises(ParameterError) as exc:
        parse_endpoints("12", None)
    assert (exc.value.error_id, exc.value.field) == (ErrorId.MISSING_PARAMETER, "destination")
    assert parse_endpoints("1,2", "3,4") == (Coordinate(lat=1.0, lng=2.0), Coordinate(lat=3.0, lng=4.0))
