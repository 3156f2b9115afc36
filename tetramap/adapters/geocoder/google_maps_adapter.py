"""Google Maps geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import logging
from decimal import Decimal

import httpx

from tetramap.application.ports.geocoder_port import GeocoderPort
from tetramap.config import settings
from tetramap.domain.errors import InvalidArgument, LocationNotFound, ProviderUnavailable
from tetramap.domain.value_objects.location import Coordinates

logger = logging.getLogger(__name__)

GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


class GoogleMapsAdapter(GeocoderPort):
    """Google Maps implementation of GeocoderPort."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str | None = None,
        timeout: float | None = None,
    ):
        self._client = client
        self._api_key = api_key or settings.google_maps_token
        self._timeout = timeout or settings.geocoder_timeout

    async def resolve(self, query: str) -> Coordinates:
        """Geocode a place name using the Google Maps Geocoding API."""
        query = query.strip()
        if not query:
            raise InvalidArgument("Empty geocoding query")

        try:
            response = await self._client.get(
                GOOGLE_GEOCODE_URL,
                params={"address": query, "key": self._api_key},
                timeout=self._timeout,
            )
        except httpx.HTTPError as e:
            raise ProviderUnavailable(f"Google Maps request failed: {e!r}") from e

        if response.is_error:
            raise ProviderUnavailable(f"Google Maps returned HTTP {response.status_code}")

        try:
            # Keep the provider's digits exactly: no float round-trip.
            data = response.json(parse_float=Decimal)
        except ValueError as e:
            raise ProviderUnavailable("Google Maps returned a malformed body") from e
        if not isinstance(data, dict):
            raise ProviderUnavailable("Google Maps returned an unexpected body")

        status = data.get("status")
        results = data.get("results") or []
        if status == "ZERO_RESULTS" or (status == "OK" and not results):
            logger.info("Google Maps found nothing for '%s'", query)
            raise LocationNotFound(query)
        if status != "OK":
            raise ProviderUnavailable(
                f"Google Maps status {status} ({data.get('error_message', 'no detail')})"
            )

        try:
            loc = results[0]["geometry"]["location"]
            point = Coordinates.from_values(loc["lat"], loc["lng"])
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise ProviderUnavailable("Google Maps result has no usable location") from e

        logger.info("Google Maps resolved '%s' → (%s)", query, point)
        return point
