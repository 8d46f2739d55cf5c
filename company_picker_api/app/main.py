"""
Main entrypoint for the Company Picker API.

This module assembles the FastAPI application, sets up logging, CORS
and the JSON file store, and includes the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn company_picker_api.app.main:app --port 5000
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.storage import JsonFileStore


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module level settings
        read from the environment; tests pass their own to point the
        store at a temporary directory.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = JsonFileStore(settings.companies_path(), settings.selections_path())

    # Browser front‑ends are served from another origin.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # The routes are exposed at the root for existing clients and under
    # /api/v1 alongside them.
    app.include_router(v1_router)
    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("startup")
    async def startup_event() -> None:
        # Reads should only ever fail on I/O or parse errors, never on a
        # missing file.
        app.state.store.ensure_files()
        logger.info(
            "Serving catalog %s and selections %s",
            settings.companies_path(),
            settings.selections_path(),
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
