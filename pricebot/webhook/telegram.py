"""Telegram Bot API reply delivery.

Sends the bot's answer back to the chat a webhook update came from.
Delivery is attempted once; failures are returned to the caller, never
retried.
"""

from __future__ import annotations

import httpx

from pricebot.models import SendMessageRequest, TelegramUpdate
from pricebot.webhook.models import (
    Delivered,
    DeliveryResult,
    InboundMessage,
    TransportError,
)


def to_inbound_message(update: TelegramUpdate) -> InboundMessage:
    """Extract the message text and chat id from a Telegram update."""
    return InboundMessage(text=update.message.text, chat_id=update.message.chat.id)


class TelegramReplySender:
    """Sends messages through the Telegram Bot API."""

    def __init__(self, bot_token: str, api_url: str = "https://api.telegram.org") -> None:
        self._bot_token = bot_token
        self._api_url = api_url.rstrip("/")

    @property
    def send_message_url(self) -> str:
        return f"{self._api_url}/bot{self._bot_token}/sendMessage"

    async def send_reply(self, chat_id: int, text: str) -> DeliveryResult:
        """Post a reply to its chat. HTTP 200 is the only success status."""
        payload = SendMessageRequest(chat_id=chat_id, text=text)

        try:
            async with httpx.AsyncClient(verify=True) as client:
                resp = await client.post(
                    self.send_message_url, json=payload.model_dump(),
                )
        except httpx.HTTPError as exc:
            # the exception text can contain the request URL, and with it the token
            return TransportError(reason=type(exc).__name__)

        if resp.status_code != 200:
            return TransportError(
                reason=f"unexpected status {resp.status_code}",
                status_code=resp.status_code,
            )
        return Delivered(chat_id=chat_id)
