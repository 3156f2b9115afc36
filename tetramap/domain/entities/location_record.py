"""LocationRecord entity — one directory entry per chat user."""

from dataclasses import dataclass

from tetramap.domain.value_objects.location import Location


@dataclass
class LocationRecord:
    user_id: str
    location: Location
    user_name: str
