"""CORS API Routes - Route registration only."""

from fastapi import APIRouter

from btpxpress.api import API_PREFIX
from btpxpress.api.cors import api

# Prefix goes on the include so the empty-path route resolves to API_PREFIX
router = APIRouter()
router.include_router(api.router, prefix=API_PREFIX, tags=["CORS"])
