from __future__ import annotations

import itertools

import pytest

from meteostats.coordinates import CardinalPoint, Latitude, Longitude, LongitudeDirection
from meteostats.errors import FormatError, InvalidComponent, InvalidDirection, InvalidLength


def test_cardinal_point_decodes_components():
    point = CardinalPoint.decode("402443")

    assert point == CardinalPoint(degrees=40, minutes=24, seconds=43)


def test_cardinal_point_encode_pads_to_six_digits():
    assert CardinalPoint(3, 4, 5).encode() == "030405"
    assert len(CardinalPoint(0, 0, 0).encode()) == 6


@pytest.mark.parametrize("components", [(0, 0, 0), (99, 99, 99), (3, 40, 41), (41, 17, 34), (7, 0, 59)])
def test_cardinal_point_round_trip(components):
    point = CardinalPoint(*components)

    assert CardinalPoint.decode(point.encode()) == point


def test_cardinal_point_accepts_out_of_range_minutes():
    # Range checks are left to upstream validation.
    assert CardinalPoint.decode("128099") == CardinalPoint(12, 80, 99)


@pytest.mark.parametrize("text", ["", "12345", "1234567", "40244"])
def test_cardinal_point_rejects_wrong_length(text):
    with pytest.raises(InvalidLength):
        CardinalPoint.decode(text)


@pytest.mark.parametrize("text", ["12A456", "1234-6", "+12345", " 12345", "ab3456"])
def test_cardinal_point_rejects_non_digit_pairs(text):
    with pytest.raises(InvalidComponent):
        CardinalPoint.decode(text)


def test_codec_errors_are_value_errors():
    with pytest.raises(ValueError):
        CardinalPoint.decode("12A456")
    assert issubclass(InvalidLength, FormatError)


def test_longitude_decodes_direction():
    west = Longitude.decode("0340412")
    east = Longitude.decode("0204121")

    assert west.point == CardinalPoint(3, 40, 41)
    assert west.direction is LongitudeDirection.WEST
    assert east.direction is LongitudeDirection.EAST


def test_longitude_round_trip():
    for direction, components in itertools.product(LongitudeDirection, [(0, 0, 0), (17, 59, 1), (99, 99, 99)]):
        longitude = Longitude(CardinalPoint(*components), direction)
        assert Longitude.decode(longitude.encode()) == longitude


def test_longitude_rejects_unknown_direction():
    with pytest.raises(InvalidDirection):
        Longitude.decode("0123456")


def test_longitude_rejects_six_characters():
    with pytest.raises(InvalidLength):
        Longitude.decode("012345")


def test_longitude_propagates_component_errors():
    with pytest.raises(InvalidComponent):
        Longitude.decode("01X3451")


def test_longitude_signed_degrees():
    assert Longitude.decode("0330002").to_degrees() == pytest.approx(-3.5)
    assert Longitude.decode("0330001").to_degrees() == pytest.approx(3.5)


def test_latitude_round_trip_and_length():
    latitude = Latitude.decode("411734")

    assert latitude.encode() == "411734"
    assert str(latitude) == "411734"
    assert latitude.to_degrees() == pytest.approx(41 + 17 / 60 + 34 / 3600)
    with pytest.raises(InvalidLength):
        Latitude.decode("4117341")
