"""
API endpoints.

Route prefix constants shared by the routers.
"""

API_PREFIX: str = "/api"

__all__ = [
    "API_PREFIX",
]
