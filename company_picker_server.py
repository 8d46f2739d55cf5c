"""Entry point for the Company Picker API server.

Starts the FastAPI application with Uvicorn.  Host, port and data
file locations come from environment variables (see
``company_picker_api.app.core.config``); by default the server
listens on ``0.0.0.0:5000`` and keeps ``companies.json`` and
``user.json`` in the working directory.

Usage:
    python company_picker_server.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from company_picker_api.app.core.config import settings
from company_picker_api.app.main import app


async def serve() -> None:
    """Run the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    logging.getLogger(__name__).info("Backend running on http://%s:%s", settings.host, settings.port)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(serve())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
