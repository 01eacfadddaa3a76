"""Status endpoint response models."""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthStatus(BaseModel):
    """Health check response."""

    status: str = Field(default="UP", description="Service status")
    timestamp: datetime = Field(
        default_factory=datetime.now,
        description="Local server time when the check ran (ISO-8601)",
    )


class VersionInfo(BaseModel):
    """Version response."""

    version: str = Field(..., description="API version")
    environment: str = Field(..., description="Deployment environment")


class SecuredMessage(BaseModel):
    """Response of the secured probe endpoint."""

    message: str = Field(
        default="This is a secured endpoint", description="Fixed message"
    )
