"""
Status endpoints.

Health, version and an authenticated probe used to verify credentials.
"""

from fastapi import APIRouter
from loguru import logger

from btpxpress import __version__
from btpxpress.api.status.models import HealthStatus, SecuredMessage, VersionInfo
from btpxpress.di import AuthenticatedDep, SettingsDep

router = APIRouter()


@router.get("/health", response_model=HealthStatus)
async def health() -> HealthStatus:
    """
    Health check endpoint.

    Returns:
        Status "UP" and the current server time
    """
    logger.debug("Performing health check")
    return HealthStatus()


@router.get("/version", response_model=VersionInfo)
async def get_version(settings: SettingsDep) -> VersionInfo:
    """
    Version endpoint.

    Settings are injected per request, but ``get_settings`` is cached, so a
    changed ENVIRONMENT shows up only after ``get_settings.cache_clear()``
    or a restart.

    Returns:
        API version and the configured deployment environment
    """
    return VersionInfo(version=__version__, environment=settings.environment)


@router.get(
    "/secured",
    response_model=SecuredMessage,
    responses={401: {"description": "Missing or invalid bearer token"}},
)
async def get_secured_endpoint(_: AuthenticatedDep) -> SecuredMessage:
    """Endpoint reachable only with a valid bearer token."""
    return SecuredMessage()
