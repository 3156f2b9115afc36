"""Tests for reply adapters."""

import json

import httpx
import pytest

from tests.fakes import FakeGeocoder, InMemoryDirectory
from tetramap.adapters.chat.reply_adapters import LoggingReplyAdapter, WebhookReplyAdapter
from tetramap.application.use_cases.command_handler import CommandEvent
from tetramap.infrastructure.api.dependencies import build_dispatcher

WEBHOOK = "https://discord.com/api/webhooks/1/abc"


@pytest.mark.asyncio
async def test_webhook_posts_content():
    seen: list[httpx.Request] = []

    def handler(request):
        seen.append(request)
        return httpx.Response(204)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        await WebhookReplyAdapter(client, WEBHOOK).send("chan-1", "Location cleared.")

    assert str(seen[0].url) == WEBHOOK
    assert json.loads(seen[0].content) == {
        "content": "Location cleared.",
        "allowed_mentions": {"parse": []},
    }


@pytest.mark.asyncio
async def test_webhook_failure_raises():
    async with httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(500))) as client:
        with pytest.raises(httpx.HTTPStatusError):
            await WebhookReplyAdapter(client, WEBHOOK).send(None, "hi")


@pytest.mark.asyncio
async def test_logging_reply_logs(caplog):
    caplog.set_level("INFO")
    await LoggingReplyAdapter().send("chan-1", "hello there")
    assert "hello there" in caplog.text


@pytest.mark.asyncio
@pytest.mark.parametrize("command, argument, echoed", [
    ("location", "@everyone", "Could not find a location matching '@everyone'."),
    ("flight", "@here", "Flight @here received."),
])
async def test_echoed_mentions_do_not_ping(command, argument, echoed):
    payloads: list[dict] = []

    def handler(request):
        payloads.append(json.loads(request.content))
        return httpx.Response(204)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        dispatcher = build_dispatcher(
            FakeGeocoder(), InMemoryDirectory(), WebhookReplyAdapter(client, WEBHOOK)
        )
        await dispatcher.execute(
            command,
            CommandEvent(author_id="42", author_display_name="amp", argument_text=argument),
        )

    assert payloads == [{"content": echoed, "allowed_mentions": {"parse": []}}]
