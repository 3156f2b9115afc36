"""Port interface for the location directory (one record per user)."""

from abc import ABC, abstractmethod

from tetramap.domain.entities.location_record import LocationRecord
from tetramap.domain.value_objects.location import Location


class LocationDirectory(ABC):
    @abstractmethod
    async def exists(self, user_id: str) -> bool:
        """Whether a record for the user is present.

        Empty or ambiguous backend responses count as absent.
        """
        ...

    @abstractmethod
    async def get(self, user_id: str) -> LocationRecord | None:
        ...

    @abstractmethod
    async def save(self, user_id: str, location: Location, user_name: str) -> None:
        """Insert the record, or replace location and user_name if it exists."""
        ...

    @abstractmethod
    async def delete(self, user_id: str) -> None:
        """Remove the user's record. Absent records are not an error."""
        ...
