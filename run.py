"""Entry point for the Users API server.

Starts uvicorn serving ``users_api.app.main:app``.  Host and port come
from the ``HOST`` and ``PORT`` environment variables (or a ``.env`` file
in the working directory); the defaults are ``0.0.0.0`` and ``3000``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from users_api.app.core.config import settings
from users_api.app.main import app

logger = logging.getLogger("users_api")


class ApiServer(Server):
    """uvicorn server that announces the API URLs once it is listening."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        # uvicorn leaves ``started`` unset when lifespan startup fails and
        # exits the process when the socket cannot be bound.
        if not self.started:
            return
        base_url = f"http://localhost:{self.config.port}"
        logger.info("Server running on port %s", self.config.port)
        logger.info("Health check: %s/health", base_url)
        logger.info("API endpoints: %s/api/users", base_url)


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        access_log=False,
    )
    await ApiServer(config).serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
