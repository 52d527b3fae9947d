"""Data models for the webhook command pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InboundMessage:
    """Chat message decoded from one Telegram webhook call."""

    text: str
    chat_id: int


@dataclass(frozen=True)
class OutboundReply:
    chat_id: int
    text: str


@dataclass(frozen=True)
class PriceQuote:
    high: float
    average: float
    low: float


@dataclass(frozen=True)
class NotFound:
    """The pricing service answered, but without a price for the tag."""

    print_tag: str


@dataclass(frozen=True)
class TransportError:
    """An outbound call failed or returned a non-success status."""

    reason: str
    status_code: int | None = None


@dataclass(frozen=True)
class Delivered:
    chat_id: int


PriceLookup = PriceQuote | NotFound | TransportError
DeliveryResult = Delivered | TransportError
