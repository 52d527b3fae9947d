"""Shared test fixtures for pricebot."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from pricebot.config import Settings

# --- Factory functions for test data ---


def make_price_response(
    status: str = "success",
    high: float | None = 10.5,
    average: float | None = 7.25,
    low: float | None = 3.0,
) -> dict[str, Any]:
    """Factory for a yugiohprices price_for_print_tag body."""
    return {
        "status": status,
        "data": {
            "name": "Blue-Eyes White Dragon",
            "card_type": "monster",
            "property": None,
            "family": "light",
            "type": "Dragon",
            "price_data": {
                "name": "Legend of Blue Eyes White Dragon",
                "print_tag": "LOB-001",
                "rarity": "Ultra Rare",
                "price_data": {
                    "status": status,
                    "data": {
                        "listings": [],
                        "prices": {
                            "high": high,
                            "low": low,
                            "average": average,
                            "shift": 0.01,
                            "shift_3": 0.02,
                            "shift_7": -0.03,
                            "shift_21": 0.0,
                            "shift_30": 0.1,
                            "shift_90": 0.2,
                            "shift_180": 0.3,
                            "shift_365": 0.4,
                            "updated_at": "2026-01-01 00:00:00 UTC",
                        },
                    },
                },
            },
        },
    }


def make_telegram_update(text: str = "hello", chat_id: int = 12345) -> dict[str, Any]:
    return {
        "update_id": 1,
        "message": {
            "message_id": 1,
            "chat": {"id": chat_id, "type": "private"},
            "text": text,
        },
    }


def mock_async_client(response: Any = None, side_effect: Any = None) -> AsyncMock:
    """Build an AsyncMock usable as ``async with httpx.AsyncClient() as client``."""
    client = AsyncMock()
    if side_effect is not None:
        client.get.side_effect = side_effect
        client.post.side_effect = side_effect
    else:
        client.get.return_value = response
        client.post.return_value = response
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=False)
    return client


def mock_response(status_code: int = 200, json_body: Any = None) -> MagicMock:
    resp = MagicMock(status_code=status_code)
    if isinstance(json_body, Exception):
        resp.json.side_effect = json_body
    else:
        resp.json.return_value = json_body
    return resp


@pytest.fixture
def settings() -> Settings:
    return Settings(
        bot_token="123:ABC",
        telegram_api_url="https://telegram.test",
        pricing_api_url="https://prices.test",
    )
