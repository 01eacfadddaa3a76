"""
FastAPI application factory.

Creates and configures the FastAPI application with middleware,
routers, and exception handlers.
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from btpxpress import __version__
from btpxpress.config import get_settings
from btpxpress.core.logging import logger
from btpxpress.exception_handlers import (
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from btpxpress.lifespan import lifespan
from btpxpress.middleware import TraceIDMiddleware
from btpxpress.openapi import configure_openapi
from btpxpress.routes import register_routes


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    # Must be set BEFORE creating FastAPI instance
    docs_url = "/docs" if settings.enable_docs else None
    redoc_url = "/redoc" if settings.enable_docs else None
    openapi_url = "/openapi.json" if settings.enable_docs else None

    app = FastAPI(
        title=settings.project_name,
        description=settings.project_description,
        version=__version__,
        lifespan=lifespan,
        docs_url=docs_url,
        redoc_url=redoc_url,
        openapi_url=openapi_url,
    )

    # RFC 7807 Problem Details
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.add_middleware(TraceIDMiddleware)

    register_routes(app)

    configure_openapi(app)

    logger.info(f" FastAPI application created (v{__version__})")
    logger.debug(f"Docs enabled: {settings.enable_docs}")

    return app
