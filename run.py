"""Entry point for serving the Automytee content API.

Configuration such as MONGODB_URI, LOG_LEVEL and the bind address is
read from the environment (see ``automytee_api.app.core.config``).
A missing MONGODB_URI stops the server during startup.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from automytee_api.app.core.config import settings
from automytee_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn.

    Host and port are read from ``API_HOST`` and ``API_PORT``.
    Defaults are ``0.0.0.0`` and ``8000``.
    """
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")
