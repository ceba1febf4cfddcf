"""
Main entrypoint for the InsureConnect API.

This module assembles the FastAPI application.  ``create_app`` sets up
logging, CORS, error handlers and the API router, and ties the
database handle's lifecycle to the application: it is opened on
startup and closed on shutdown.  The module‑level ``app`` lets uvicorn
discover the application directly::

    uvicorn insureconnect_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.errors import StoreError, register_exception_handlers
from .core.logging_config import setup_logging
from .services.provider_service import ProviderService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the settings read from the
        environment at import time.
    database : Optional[Database]
        Database handle to serve from.  When omitted, one is built from
        ``settings.database_url``.  The application opens it on startup
        and closes it on shutdown.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.database = database or Database(settings.database_url)
    app.state.provider_service = ProviderService(app.state.database)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        # A missing database must not keep the API from starting; requests
        # fail with StoreError until the handle can be opened.
        try:
            app.state.database.open()
        except StoreError as exc:
            logger.error("Database unavailable at startup: %s", exc.message)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        app.state.database.close()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
