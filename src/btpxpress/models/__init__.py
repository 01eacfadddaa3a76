"""
Models package.

Contains shared Pydantic models used across multiple modules.
Endpoint-specific models live next to their endpoints.
"""

from btpxpress.models.errors import ProblemDetail, ValidationErrorDetail

__all__ = [
    "ProblemDetail",
    "ValidationErrorDetail",
]
