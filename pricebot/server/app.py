"""FastAPI webhook application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from pricebot.config import Settings
from pricebot.models import TelegramUpdate
from pricebot.pricing.client import PricingClient
from pricebot.webhook.commands import CommandProcessor
from pricebot.webhook.models import TransportError
from pricebot.webhook.telegram import TelegramReplySender, to_inbound_message

logger = logging.getLogger(__name__)


def create_app_from_env() -> FastAPI:
    """Factory for uvicorn --factory: reads config from environment variables."""
    return create_app(Settings.from_env())


def build_processor(settings: Settings) -> CommandProcessor:
    return CommandProcessor(
        pricing_client=PricingClient(settings.pricing_api_url),
        reply_sender=TelegramReplySender(
            bot_token=settings.bot_token, api_url=settings.telegram_api_url,
        ),
    )


def create_app(
    settings: Settings,
    processor: CommandProcessor | None = None,
) -> FastAPI:
    """Create the bot's webhook app."""
    if processor is None:
        processor = build_processor(settings)

    app = FastAPI(docs_url=None, redoc_url=None)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/")
    async def telegram_webhook(request: Request) -> Response:
        body = await request.body()
        try:
            update = TelegramUpdate.model_validate_json(body)
        except ValidationError as exc:
            logger.error("Parse webhook request: %s", exc)
            return Response()

        message = to_inbound_message(update)
        result = await processor.handle(message)
        if isinstance(result, TransportError):
            logger.warning(
                "Reply not delivered: %s", result.reason,
                extra={"chat_id": message.chat_id, "status_code": result.status_code},
            )
        else:
            logger.info("reply sent", extra={"chat_id": message.chat_id})
        return Response()

    app.add_middleware(CORSMiddleware, allow_origins=["*"])

    return app
