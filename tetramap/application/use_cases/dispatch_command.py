"""DispatchCommandUseCase — route a chat command to its handler and reply."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tetramap.application.ports.reply_port import ReplyPort
from tetramap.application.use_cases.command_handler import (
    CommandEvent,
    CommandHandler,
    CommandResult,
)

logger = logging.getLogger(__name__)


class UnknownCommand(LookupError):
    pass


@dataclass
class CommandHelp:
    name: str
    description: str
    usage: str
    example: str


class DispatchCommandUseCase:
    """Looks up a handler by name, runs it, and sends the reply.

    Reply delivery failures are logged and never change the command result.
    """

    def __init__(self, handlers: list[CommandHandler], reply: ReplyPort):
        self._handlers = {h.name: h for h in handlers}
        self._reply = reply

    def commands(self) -> list[CommandHelp]:
        return [
            CommandHelp(name=h.name, description=h.description, usage=h.usage, example=h.example)
            for h in self._handlers.values()
        ]

    async def execute(self, command: str, event: CommandEvent) -> CommandResult:
        handler = self._handlers.get(command)
        if handler is None:
            raise UnknownCommand(command)

        result = await handler.execute(event)

        try:
            await self._reply.send(event.channel_id, result.reply)
        except Exception as e:
            logger.warning("Error sending reply for command '%s': %s", command, e)

        return result
