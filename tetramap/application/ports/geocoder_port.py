"""Port interface for geocoding free text to coordinates."""

from abc import ABC, abstractmethod

from tetramap.domain.value_objects.location import Coordinates


class GeocoderPort(ABC):
    @abstractmethod
    async def resolve(self, query: str) -> Coordinates:
        """Convert a free-text place description to coordinates.

        The first provider candidate is authoritative.

        Raises:
            InvalidArgument: query is empty or whitespace only.
            LocationNotFound: the provider returned no candidates.
            ProviderUnavailable: transport or authentication failure.
        """
        ...
