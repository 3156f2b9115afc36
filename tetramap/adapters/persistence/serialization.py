"""Location ⇄ JSON mapping used by every storage backend.

Stored shape carries an explicit variant tag and keeps decimals as strings::

    {"type": "coordinates", "lat": "51.5074", "lng": "-0.1278"}
    {"type": "flight", "id": "BA117"}
    {"type": "journey", "flights": [...], "destination": {...}}

Rows written by the previous bot use the externally tagged form
(``{"Coordinates": {"lat": ..., "lng": ...}}``) and are still readable.
"""

from __future__ import annotations

from typing import Any

from tetramap.domain.errors import CorruptRecord
from tetramap.domain.value_objects.location import Coordinates, Flight, Journey, Location

_LEGACY_TAGS = {"Coordinates": "coordinates", "Flight": "flight", "Journey": "journey"}


def location_to_json(location: Location) -> dict[str, Any]:
    if isinstance(location, Coordinates):
        return {"type": Coordinates.kind, "lat": str(location.lat), "lng": str(location.lng)}
    if isinstance(location, Flight):
        return {"type": Flight.kind, "id": location.id}
    if isinstance(location, Journey):
        return {
            "type": Journey.kind,
            "flights": [location_to_json(f) for f in location.flights],
            "destination": location_to_json(location.destination),
        }
    raise TypeError(f"Not a location: {location!r}")


def location_from_json(data: Any) -> Location:
    """Decode a stored location. Raises CorruptRecord on unknown shapes."""
    try:
        return _decode(data)
    except CorruptRecord:
        raise
    except (KeyError, TypeError, ValueError) as e:
        raise CorruptRecord(f"Undecodable location {data!r}: {e}") from e


def _decode(data: Any) -> Location:
    if not isinstance(data, dict):
        raise CorruptRecord(f"Location is not an object: {data!r}")

    if "type" in data:
        kind, body = data["type"], data
    elif len(data) == 1 and next(iter(data)) in _LEGACY_TAGS:
        legacy_tag, body = next(iter(data.items()))
        kind = _LEGACY_TAGS[legacy_tag]
    else:
        raise CorruptRecord(f"Location has no variant tag: {data!r}")

    if kind == Coordinates.kind:
        return Coordinates.from_values(body["lat"], body["lng"])
    if kind == Flight.kind:
        return Flight(id=str(body["id"]))
    if kind == Journey.kind:
        flights = tuple(_decode_tagged(f, Flight) for f in body["flights"])
        destination = _decode_tagged(body["destination"], Coordinates)
        return Journey(flights=flights, destination=destination)
    raise CorruptRecord(f"Unknown location type {kind!r}")


def _decode_tagged(data: Any, expected: type):
    # Nested values may omit their tag in legacy rows.
    if isinstance(data, dict) and "type" not in data and not (
        len(data) == 1 and next(iter(data)) in _LEGACY_TAGS
    ):
        data = {"type": expected.kind, **data}
    value = _decode(data)
    if not isinstance(value, expected):
        raise CorruptRecord(f"Expected {expected.kind}, got {type(value).kind}")
    return value
