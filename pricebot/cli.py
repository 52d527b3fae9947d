"""Click CLI for running the price bot."""

from __future__ import annotations

import logging

import click
import uvicorn

from pricebot.config import ConfigError, Settings
from pricebot.logging_setup import configure_logging
from pricebot.server.app import create_app

logger = logging.getLogger(__name__)


@click.group()
def cli() -> None:
    """Card price Telegram bot."""


@cli.command()
@click.option("--host", default=None, help="Bind address (overrides HOST).")
@click.option("--port", type=int, default=None, help="Listen port (overrides PORT).")
@click.option("--log-level", default=None, help="Log level (overrides LOG_LEVEL).")
def serve(host: str | None, port: int | None, log_level: str | None) -> None:
    """Serve the Telegram webhook until SIGINT or SIGTERM."""
    try:
        settings = Settings.from_env()
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    if host is None:
        host = settings.host
    if port is None:
        port = settings.port
    level = (log_level or settings.log_level).upper()
    configure_logging(level)

    app = create_app(settings)
    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_config=None,
        log_level=level.lower(),
        timeout_keep_alive=settings.keep_alive_timeout,
        timeout_graceful_shutdown=settings.shutdown_timeout,
    )
    logger.info("Starting server on %s:%d", host, port)
    uvicorn.Server(config).run()


if __name__ == "__main__":
    cli()
