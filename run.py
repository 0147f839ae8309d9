"""Entry point for the Sons Mágicos Instruments API.

Launches the FastAPI application with Uvicorn.  Host and port come
from ``API_HOST`` and ``API_PORT`` (defaults ``0.0.0.0`` and
``8000``); other configuration such as the database path and the
Basic authentication account is read from the environment by
``sons_magicos_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from sons_magicos_api.app.core.config import settings
from sons_magicos_api.app.main import app


async def run_api() -> None:
    """Serve the API until the process is interrupted."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    logging.getLogger(__name__).info("Starting %s %s", settings.project_name, settings.api_version)
    await run_api()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
