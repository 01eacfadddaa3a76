"""Status API Routes - Route registration only."""

from fastapi import APIRouter

from btpxpress.api import API_PREFIX
from btpxpress.api.status import api

router = APIRouter(prefix=API_PREFIX)
router.include_router(api.router, tags=["Status"])
