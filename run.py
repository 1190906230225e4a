"""Entry point for the attendance log service.

Starts the FastAPI application under Uvicorn.  Configuration such as
HOST, PORT, DATA_FILE and LOG_LEVEL is read from environment
variables; see ``attendance_api/app/core/config.py`` for the full
list and defaults.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from attendance_api.app.core.config import settings
from attendance_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Keep the handlers installed by ``setup_logging``.
        log_config=None,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")
