"""
Dependency injection aliases for btpxpress.

Uses FastAPI's Depends with typing.Annotated for clean type hints in
endpoint signatures.
"""

from typing import Annotated

from fastapi import Depends

from btpxpress.config import Settings, get_settings
from btpxpress.security import require_authenticated

SettingsDep = Annotated[Settings, Depends(get_settings)]
"""Injected Settings instance (cached via lru_cache)."""

AuthenticatedDep = Annotated[str, Depends(require_authenticated)]
"""Bearer token of an authenticated caller; rejects everyone else with 401."""

__all__ = [
    "SettingsDep",
    "AuthenticatedDep",
]
