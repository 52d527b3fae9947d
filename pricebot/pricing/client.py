"""YGOPrices client for card prices by print tag.

https://yugiohprices.docs.apiary.io/#reference/checking-card-prices
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from pricebot.models import PriceForPrintTagResponse
from pricebot.webhook.models import NotFound, PriceLookup, PriceQuote, TransportError

logger = logging.getLogger(__name__)

_SUCCESS_STATUS = "success"


class PricingClient:
    """Looks up card prices on the YGOPrices API."""

    def __init__(self, base_url: str) -> None:
        self._base_url = base_url.rstrip("/")

    def price_url(self, print_tag: str) -> str:
        return f"{self._base_url}/api/price_for_print_tag/{quote(print_tag, safe='')}"

    async def fetch_price(self, print_tag: str) -> PriceLookup:
        """Fetch the current prices for a print tag.

        Returns NotFound when the service answers with a non-success status
        and TransportError when the call or the decode fails.
        """
        url = self.price_url(print_tag)
        try:
            async with httpx.AsyncClient() as client:
                resp = await client.get(url)
        except httpx.HTTPError as exc:
            logger.error(
                "Price for print tag request error: %s", exc,
                extra={"print_tag": print_tag},
            )
            return TransportError(reason=str(exc) or type(exc).__name__)

        try:
            body = PriceForPrintTagResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            logger.error(
                "Parse price for print tag response: %s", exc,
                extra={"print_tag": print_tag, "status_code": resp.status_code},
            )
            return TransportError(
                reason="undecodable pricing response", status_code=resp.status_code,
            )

        if body.status != _SUCCESS_STATUS:
            return NotFound(print_tag=print_tag)

        prices = body.prices
        return PriceQuote(
            high=prices.high or 0.0,
            average=prices.average or 0.0,
            low=prices.low or 0.0,
        )
