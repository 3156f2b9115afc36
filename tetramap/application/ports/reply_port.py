"""Port interface for sending reply text back to a chat channel."""

from abc import ABC, abstractmethod


class ReplyPort(ABC):
    @abstractmethod
    async def send(self, channel_id: str | None, text: str) -> None:
        ...
