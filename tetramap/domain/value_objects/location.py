"""Location value objects — where a user currently is.

A location is exactly one of three variants:

* ``Coordinates``: a resolved geographic point (exact decimals).
* ``Flight``: an opaque flight identifier, not validated.
* ``Journey``: an ordered list of flights ending at a destination point.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import ClassVar, Union


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise TypeError(f"Cannot use {value!r} as a coordinate")
    # str() of a float is its shortest repr, e.g. 51.5074 → "51.5074".
    try:
        result = Decimal(str(value).strip())
    except InvalidOperation as e:
        raise ValueError(f"Invalid coordinate value {value!r}") from e
    return result


@dataclass(frozen=True)
class Coordinates:
    lat: Decimal
    lng: Decimal

    kind: ClassVar[str] = "coordinates"

    def __post_init__(self):
        if not isinstance(self.lat, Decimal) or not isinstance(self.lng, Decimal):
            raise TypeError("Coordinates require Decimal lat/lng")
        if not self.lat.is_finite() or not self.lng.is_finite():
            raise ValueError(f"Coordinates must be finite, got {self.lat}, {self.lng}")

    @classmethod
    def from_values(cls, lat, lng) -> "Coordinates":
        """Build from Decimal, int or numeric string values without float rounding."""
        return cls(lat=_to_decimal(lat), lng=_to_decimal(lng))

    def __str__(self) -> str:
        return f"{self.lat}, {self.lng}"


@dataclass(frozen=True)
class Flight:
    id: str

    kind: ClassVar[str] = "flight"

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True)
class Journey:
    flights: tuple[Flight, ...]
    destination: Coordinates

    kind: ClassVar[str] = "journey"

    def __post_init__(self):
        # Accept any sequence but store an immutable one.
        object.__setattr__(self, "flights", tuple(self.flights))

    def __str__(self) -> str:
        legs = " → ".join(f.id for f in self.flights)
        return f"{legs} → {self.destination}" if legs else str(self.destination)


Location = Union[Coordinates, Flight, Journey]
