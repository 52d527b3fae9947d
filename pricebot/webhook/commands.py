"""Chat command processing.

Recognises ``/priceprinttag <print tag>``, looks the tag up on the pricing
service and sends a single reply to the originating chat. Every message
gets exactly one reply:

1. No command: "Invalid command!"
2. Command without a print tag: "Error fetching card price!"
3. Lookup not found or failed: "Error fetching card price!"
4. Lookup succeeded: the formatted high/average/low prices
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pricebot.webhook.models import (
    DeliveryResult,
    InboundMessage,
    NotFound,
    OutboundReply,
    PriceQuote,
    TransportError,
)

if TYPE_CHECKING:
    from pricebot.pricing.client import PricingClient
    from pricebot.webhook.telegram import TelegramReplySender

logger = logging.getLogger(__name__)

PRICE_COMMAND = "/priceprinttag"
INVALID_COMMAND_REPLY = "Invalid command!"
PRICE_ERROR_REPLY = "Error fetching card price!"


def format_price_reply(quote: PriceQuote) -> str:
    return (
        f"Prices\nHigh :${quote.high:.2f}\n"
        f"Average: ${quote.average:.2f}\n"
        f"Low: ${quote.low:.2f}"
    )


def extract_print_tag(text: str) -> str | None:
    """Return the second space-separated token of ``text``, if any."""
    parts = text.split(" ")
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]


class CommandProcessor:
    """Turns one inbound chat message into one outbound reply."""

    def __init__(
        self,
        pricing_client: PricingClient,
        reply_sender: TelegramReplySender,
    ) -> None:
        self._pricing = pricing_client
        self._replies = reply_sender

    async def handle(self, message: InboundMessage) -> DeliveryResult:
        reply = await self.build_reply(message)
        return await self._replies.send_reply(reply.chat_id, reply.text)

    async def build_reply(self, message: InboundMessage) -> OutboundReply:
        if PRICE_COMMAND not in message.text.lower():
            return OutboundReply(chat_id=message.chat_id, text=INVALID_COMMAND_REPLY)

        print_tag = extract_print_tag(message.text)
        if print_tag is None:
            return OutboundReply(chat_id=message.chat_id, text=PRICE_ERROR_REPLY)

        result = await self._pricing.fetch_price(print_tag)
        if isinstance(result, (NotFound, TransportError)):
            # users get the same reply for not-found and failed lookups
            logger.info(
                "No price for print tag: %s", result,
                extra={"chat_id": message.chat_id, "print_tag": print_tag},
            )
            return OutboundReply(chat_id=message.chat_id, text=PRICE_ERROR_REPLY)

        return OutboundReply(chat_id=message.chat_id, text=format_price_reply(result))
