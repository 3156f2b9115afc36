"""Reply adapters — implement ReplyPort."""

from __future__ import annotations

import logging

import httpx

from tetramap.application.ports.reply_port import ReplyPort

logger = logging.getLogger(__name__)


class WebhookReplyAdapter(ReplyPort):
    """Posts replies to a Discord-style incoming webhook (``{"content": ...}``).

    Mentions in the text are never resolved. Webhooks are bound to one
    channel, so ``channel_id`` is only logged. Errors propagate; the
    dispatcher decides what to do with them.
    """

    def __init__(self, client: httpx.AsyncClient, webhook_url: str):
        self._client = client
        self._url = webhook_url

    async def send(self, channel_id: str | None, text: str) -> None:
        # Replies echo user input; never let it ping @everyone, roles or users.
        response = await self._client.post(
            self._url, json={"content": text, "allowed_mentions": {"parse": []}}
        )
        response.raise_for_status()
        logger.debug("Reply delivered to channel %s", channel_id)


class LoggingReplyAdapter(ReplyPort):
    """Used when no webhook is configured: replies only travel in the HTTP response."""

    async def send(self, channel_id: str | None, text: str) -> None:
        logger.info("Reply for channel %s: %s", channel_id, text)
