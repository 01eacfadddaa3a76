"""
Application lifecycle management.

Handles startup and shutdown events for the FastAPI application.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from btpxpress.config import get_settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Args:
        app: FastAPI application instance
    """
    settings = get_settings()
    logger.info(" Starting btpxpress API...")
    logger.info(f"Application version: {app.version}")
    logger.info(f"Environment: {settings.environment}")

    yield

    logger.info(" Shutting down btpxpress API...")
