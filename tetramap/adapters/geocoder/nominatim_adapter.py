"""Nominatim geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import logging

import httpx

from tetramap.application.ports.geocoder_port import GeocoderPort
from tetramap.config import settings
from tetramap.domain.errors import InvalidArgument, LocationNotFound, ProviderUnavailable
from tetramap.domain.value_objects.location import Coordinates

logger = logging.getLogger(__name__)

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"


class NominatimAdapter(GeocoderPort):
    """OpenStreetMap Nominatim implementation of GeocoderPort.

    Nominatim returns coordinates as strings, so they convert to Decimal
    without any precision loss.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        user_agent: str | None = None,
        timeout: float | None = None,
    ):
        self._client = client
        self._user_agent = user_agent or settings.geocoder_user_agent
        self._timeout = timeout or settings.geocoder_timeout

    async def resolve(self, query: str) -> Coordinates:
        query = query.strip()
        if not query:
            raise InvalidArgument("Empty geocoding query")

        try:
            response = await self._client.get(
                NOMINATIM_URL,
                params={"q": query, "format": "json", "limit": 1},
                headers={"User-Agent": self._user_agent},
                timeout=self._timeout,
            )
            response.raise_for_status()
            results = response.json()
        except httpx.HTTPError as e:
            raise ProviderUnavailable(f"Nominatim request failed: {e!r}") from e
        except ValueError as e:
            raise ProviderUnavailable("Nominatim returned a malformed body") from e

        if not isinstance(results, list):
            raise ProviderUnavailable("Nominatim returned an unexpected body")
        if not results:
            logger.info("Nominatim returned no results for '%s'", query)
            raise LocationNotFound(query)

        try:
            point = Coordinates.from_values(results[0]["lat"], results[0]["lon"])
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderUnavailable("Nominatim result has no usable location") from e

        logger.info("Nominatim resolved '%s' → (%s)", query, point)
        return point
