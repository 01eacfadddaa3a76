"""
CORS preflight endpoint.

Answers OPTIONS for every path under the API prefix, the prefix itself
included, with a fixed set of permissive CORS headers taken from settings.
"""

from fastapi import APIRouter, Response, status
from fastapi.routing import APIRoute
from starlette.routing import Match
from starlette.types import Scope

from btpxpress.di import SettingsDep


class PreflightRoute(APIRoute):
    """
    Route that only exists for OPTIONS requests.

    Other methods see no match at all, so they fall through to 404 or to the
    router's trailing-slash redirect instead of a 405 from the catch-all.
    """

    def matches(self, scope: Scope) -> tuple[Match, Scope]:
        if scope["type"] == "http" and scope["method"] != "OPTIONS":
            return Match.NONE, {}
        return super().matches(scope)


router = APIRouter(route_class=PreflightRoute)


@router.options("", status_code=status.HTTP_200_OK, include_in_schema=False)
@router.options("/{path:path}", status_code=status.HTTP_200_OK)
async def preflight(settings: SettingsDep, path: str = "") -> Response:
    """
    CORS preflight handler.

    Args:
        path: Any path below the API prefix (unused)

    Returns:
        Empty 200 response with Access-Control-* headers
    """
    return Response(status_code=status.HTTP_200_OK, headers=settings.get_cors_headers())
