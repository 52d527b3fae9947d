"""Shared Pydantic wire models for pricebot."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class WireModel(BaseModel):
    """Base for decoded JSON bodies: a null value falls back to the field default."""

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


# --- Telegram Models ---


class TelegramChat(WireModel):
    model_config = ConfigDict(frozen=True)

    id: int = 0


class TelegramMessage(WireModel):
    model_config = ConfigDict(frozen=True)

    text: str = ""
    chat: TelegramChat = Field(default_factory=TelegramChat)


class TelegramUpdate(WireModel):
    """Subset of https://core.telegram.org/bots/api#update used by the bot."""

    model_config = ConfigDict(frozen=True)

    message: TelegramMessage = Field(default_factory=TelegramMessage)


class SendMessageRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    chat_id: int
    text: str


# --- Pricing Models ---


class PrintTagPrices(WireModel):
    high: float | None = None
    low: float | None = None
    average: float | None = None
    shift: float | None = None
    shift_3: float | None = None
    shift_7: float | None = None
    shift_21: float | None = None
    shift_30: float | None = None
    shift_90: float | None = None
    shift_180: float | None = None
    shift_365: float | None = None
    updated_at: str | None = None


class PriceHistory(WireModel):
    listings: list[Any] = Field(default_factory=list)
    prices: PrintTagPrices = Field(default_factory=PrintTagPrices)


class PriceDataEnvelope(WireModel):
    status: str | None = None
    data: PriceHistory = Field(default_factory=PriceHistory)


class PrintingPriceData(WireModel):
    name: str | None = None
    print_tag: str | None = None
    rarity: str | None = None
    price_data: PriceDataEnvelope = Field(default_factory=PriceDataEnvelope)


class CardPriceData(WireModel):
    name: str | None = None
    card_type: str | None = None
    property: Any = None
    family: str | None = None
    type: str | None = None
    price_data: PrintingPriceData = Field(default_factory=PrintingPriceData)


class PriceForPrintTagResponse(WireModel):
    """Body of GET /api/price_for_print_tag/{print_tag} on yugiohprices.com."""

    status: str = ""
    data: CardPriceData | None = None

    @property
    def prices(self) -> PrintTagPrices:
        if self.data is None:
            return PrintTagPrices()
        return self.data.price_data.price_data.data.prices
