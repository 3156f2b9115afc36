"""Shared command plumbing — inbound event, result, and the error boundary."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from tetramap.domain.errors import (
    GENERIC_FAILURE,
    InvalidArgument,
    LocationNotFound,
    TetramapError,
)

logger = logging.getLogger(__name__)


@dataclass
class CommandEvent:
    """A chat command as delivered by the chat platform."""

    author_id: str
    author_display_name: str
    argument_text: str = ""
    channel_id: str | None = None


@dataclass
class CommandResult:
    """Outcome of one command, ready to be sent back to the channel."""

    command: str
    ok: bool
    reply: str
    error: str | None = None


class CommandHandler(ABC):
    """Base class for chat commands.

    ``execute`` never raises for application failures: every error is turned
    into a user-visible reply and a log entry so one bad command cannot stop
    the service from handling others.
    """

    name: ClassVar[str]
    description: ClassVar[str] = ""
    usage: ClassVar[str] = ""
    example: ClassVar[str] = ""

    async def execute(self, event: CommandEvent) -> CommandResult:
        try:
            reply = await self._run(event)
        except (InvalidArgument, LocationNotFound) as e:
            logger.warning(
                "Command '%s' from user %s rejected: %s", self.name, event.author_id, e
            )
            return CommandResult(self.name, ok=False, reply=e.user_message, error=type(e).__name__)
        except TetramapError as e:
            logger.error(
                "Command '%s' from user %s failed: %s: %s",
                self.name, event.author_id, type(e).__name__, e,
            )
            return CommandResult(self.name, ok=False, reply=e.user_message, error=type(e).__name__)
        except Exception as e:
            logger.exception("Unexpected error in command '%s' from user %s", self.name, event.author_id)
            return CommandResult(self.name, ok=False, reply=GENERIC_FAILURE, error=type(e).__name__)

        logger.debug("Processed command '%s' for user %s", self.name, event.author_id)
        return CommandResult(self.name, ok=True, reply=reply)

    @abstractmethod
    async def _run(self, event: CommandEvent) -> str:
        """Perform the command and return the reply text."""
        ...
