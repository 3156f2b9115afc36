"""Tests for Location value objects."""

from decimal import Decimal

import pytest

from tetramap.domain.value_objects.location import Coordinates, Flight, Journey


def test_coordinates_from_strings_keep_digits():
    c = Coordinates.from_values("51.50740000", "-0.12780000")
    assert c.lat == Decimal("51.50740000")
    assert str(c.lat) == "51.50740000"


def test_coordinates_from_float_uses_shortest_repr():
    c = Coordinates.from_values(51.5074, -0.1278)
    assert c.lat == Decimal("51.5074")
    assert c.lng == Decimal("-0.1278")


def test_coordinates_require_decimal():
    with pytest.raises(TypeError):
        Coordinates(lat=51.5074, lng=-0.1278)


def test_coordinates_reject_garbage():
    with pytest.raises(ValueError):
        Coordinates.from_values("north", "0")
    with pytest.raises(ValueError):
        Coordinates.from_values("NaN", "0")
    with pytest.raises(TypeError):
        Coordinates.from_values(True, 0)


@pytest.mark.parametrize("lat, lng", [
    (Decimal("NaN"), Decimal("0")),
    (Decimal("0"), Decimal("Infinity")),
    (Decimal("-Infinity"), Decimal("sNaN")),
])
def test_coordinates_must_be_finite(lat, lng):
    with pytest.raises(ValueError):
        Coordinates(lat=lat, lng=lng)


def test_non_finite_float_is_rejected():
    with pytest.raises(ValueError):
        Coordinates.from_values(float("nan"), 0)


def test_coordinates_str():
    assert str(Coordinates.from_values("51.5074", "-0.1278")) == "51.5074, -0.1278"


def test_coordinates_are_frozen():
    c = Coordinates.from_values("1", "2")
    with pytest.raises(AttributeError):
        c.lat = Decimal("3")


def test_journey_stores_flights_as_tuple():
    j = Journey(flights=[Flight("BA117"), Flight("AA100")], destination=Coordinates.from_values("40.7", "-74.0"))
    assert j.flights == (Flight("BA117"), Flight("AA100"))
    assert str(j) == "BA117 → AA100 → 40.7, -74.0"


def test_variant_tags_are_distinct():
    assert {Coordinates.kind, Flight.kind, Journey.kind} == {"coordinates", "flight", "journey"}
