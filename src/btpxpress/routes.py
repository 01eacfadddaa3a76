"""
Routes registration for the FastAPI application.
"""

from fastapi import FastAPI

from btpxpress.api.cors.router import router as cors_router
from btpxpress.api.status.router import router as status_router


def register_routes(app: FastAPI) -> None:
    """
    Register all application routers.

    Args:
        app: FastAPI application instance
    """
    app.include_router(status_router)

    # Catch-all OPTIONS; must come after the concrete routes
    app.include_router(cors_router)
