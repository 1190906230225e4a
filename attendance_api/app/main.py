"""
Main entrypoint for the Attendance Log API.

This module assembles the FastAPI application, sets up logging, CORS
and error handlers, creates the record store and includes the API
router.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``.
Importing the app here makes it easy to run with uvicorn or another
ASGI server, e.g.::

    uvicorn attendance_api.app.main:app --reload

The application title, version, network binding and data file are
provided via ``Settings`` from ``core.config``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.router import router as api_router
from .core.config import Settings, get_data_file_path, settings
from .core.exceptions import AttendanceError
from .core.logging_config import setup_logging
from .core.storage import RecordStore


logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure as ``{"error": message}``."""

    @app.exception_handler(AttendanceError)
    async def attendance_error_handler(request: Request, exc: AttendanceError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        logger.info("Rejected request to %s: %s", request.url.path, errors)
        # The only body this API accepts is ``{"name": ...}``.
        in_body = bool(errors) and errors[0].get("loc", ("",))[0] == "body"
        message = "Name is required" if in_body else "Invalid request"
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def log_startup(config: Settings, data_file: str) -> None:
    """Log where the service listens and where it keeps its data."""
    display_host = "localhost" if config.host == "0.0.0.0" else config.host
    logger.info("Server running on http://%s:%s", display_host, config.port)
    logger.info("Data stored in: %s", data_file)
    if config.host == "0.0.0.0":
        logger.info(
            "Accessible from the network on port %s; other devices can use http://<this machine's IP>:%s",
            config.port,
            config.port,
        )


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Optional[Settings]
        Settings to use instead of the module-level ``settings``.
        Tests pass an instance pointing at a temporary data file.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or settings
    # Initialise logging before anything else so that the code below can
    # safely log messages.
    setup_logging(config.log_level, config.log_file)
    data_file = get_data_file_path(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log_startup(config, data_file)
        yield
        logger.info("Server stopped")

    app = FastAPI(title=config.project_name, version=config.api_version, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # One store per application; handlers reach it through ``get_store``.
    app.state.settings = config
    app.state.store = RecordStore(data_file)

    app.include_router(api_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
