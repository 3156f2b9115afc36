"""Command endpoints — the chat platform bridge posts user commands here."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from tetramap.application.use_cases.command_handler import CommandEvent
from tetramap.application.use_cases.dispatch_command import (
    DispatchCommandUseCase,
    UnknownCommand,
)
from tetramap.infrastructure.api.dependencies import get_dispatcher, require_command_token

router = APIRouter(prefix="/commands", tags=["commands"])


class CommandRequest(BaseModel):
    author_id: str = Field(min_length=1)
    author_display_name: str
    argument_text: str = ""
    channel_id: str | None = None


@router.get("")
async def list_commands(dispatcher: DispatchCommandUseCase = Depends(get_dispatcher)):
    """Help listing: every command with its usage and an example."""
    return {"commands": [asdict(c) for c in dispatcher.commands()]}


@router.post("/{command}", dependencies=[Depends(require_command_token)])
async def run_command(
    command: str,
    body: CommandRequest,
    dispatcher: DispatchCommandUseCase = Depends(get_dispatcher),
):
    """Run one chat command and return the reply that was sent to the channel."""
    event = CommandEvent(
        author_id=body.author_id,
        author_display_name=body.author_display_name,
        argument_text=body.argument_text,
        channel_id=body.channel_id,
    )
    try:
        result = await dispatcher.execute(command, event)
    except UnknownCommand:
        raise HTTPException(status_code=404, detail=f"Unknown command '{command}'")
    return asdict(result)
