"""RegisterFlightUseCase — store a flight identifier as the caller's location.

The identifier is stored as given. Journeys (several flights plus a
destination) exist in the data model but have no command yet.
"""

from __future__ import annotations

import logging

from tetramap.application.ports.location_directory import LocationDirectory
from tetramap.application.use_cases.command_handler import CommandEvent, CommandHandler
from tetramap.domain.errors import InvalidArgument
from tetramap.domain.value_objects.location import Flight

logger = logging.getLogger(__name__)


class RegisterFlightUseCase(CommandHandler):
    name = "flight"
    description = "Add yourself to the flight scout mesh."
    usage = "[flight]"
    example = "BA117"

    def __init__(self, directory: LocationDirectory):
        self._directory = directory

    async def _run(self, event: CommandEvent) -> str:
        tokens = event.argument_text.split()
        if not tokens:
            raise InvalidArgument(
                "Missing flight identifier",
                user_message=f"Usage: {self.name} {self.usage}, e.g. '{self.name} {self.example}'.",
            )

        flight = Flight(id=tokens[0])
        await self._directory.save(event.author_id, flight, event.author_display_name)
        logger.info("User %s registered flight %s", event.author_id, flight.id)
        return f"Flight {flight.id} received."
