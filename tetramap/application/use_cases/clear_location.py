"""ClearLocationUseCase — remove the caller's location record."""

from __future__ import annotations

import logging

from tetramap.application.ports.location_directory import LocationDirectory
from tetramap.application.use_cases.command_handler import CommandEvent, CommandHandler

logger = logging.getLogger(__name__)


class ClearLocationUseCase(CommandHandler):
    name = "clear"
    description = "Hide your location from the map."

    def __init__(self, directory: LocationDirectory):
        self._directory = directory

    async def _run(self, event: CommandEvent) -> str:
        await self._directory.delete(event.author_id)
        logger.info("User %s cleared their location", event.author_id)
        return "Location cleared."
