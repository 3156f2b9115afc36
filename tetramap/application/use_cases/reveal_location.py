"""RevealLocationUseCase — geocode a place name and store it for the caller."""

from __future__ import annotations

import logging

from tetramap.application.ports.geocoder_port import GeocoderPort
from tetramap.application.ports.location_directory import LocationDirectory
from tetramap.application.use_cases.command_handler import CommandEvent, CommandHandler
from tetramap.domain.errors import InvalidArgument

logger = logging.getLogger(__name__)


class RevealLocationUseCase(CommandHandler):
    name = "location"
    description = "Reveal your location on the map."
    usage = "[location]"
    example = "London"

    def __init__(self, geocoder: GeocoderPort, directory: LocationDirectory):
        self._geocoder = geocoder
        self._directory = directory

    async def _run(self, event: CommandEvent) -> str:
        query = event.argument_text.strip()
        if not query:
            raise InvalidArgument(
                "Empty location argument",
                user_message=f"Usage: {self.name} {self.usage}, e.g. '{self.name} {self.example}'.",
            )

        coords = await self._geocoder.resolve(query)
        await self._directory.save(event.author_id, coords, event.author_display_name)
        logger.info("User %s revealed location '%s' → (%s)", event.author_id, query, coords)
        return f"Location {coords} received."
