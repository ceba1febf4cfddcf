"""Entry point for running the InsureConnect API with uvicorn.

Host and port come from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``5000``); the database location
from ``DATABASE_URL``.  Intended to be executed from the project root::

    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from insureconnect_api.app.core.config import settings
from insureconnect_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Starting InsureConnect API on http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
