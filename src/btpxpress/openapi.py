"""OpenAPI schema customization for the BTP Xpress API."""

from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

API_DESCRIPTION = """
# BTP Xpress API

Status and version endpoints for the BTP Xpress platform.

## API Endpoints

- `GET /api/health` - Liveness check with server timestamp
- `GET /api/version` - API version and deployment environment
- `GET /api/secured` - Probe requiring a bearer token
- `OPTIONS /api/{path}` - CORS preflight for any path

## Authentication

Secured endpoints expect `Authorization: Bearer <token>`.

## Error Handling

All errors follow [RFC 7807 Problem Details](https://datatracker.ietf.org/doc/html/rfc7807):

```json
{
  "type": "https://datatracker.ietf.org/doc/html/rfc7235#section-3.1",
  "title": "Unauthorized",
  "status": 401,
  "detail": "Missing Authorization header",
  "instance": "/api/secured"
}
```
"""


def custom_openapi(app: FastAPI) -> dict[str, Any]:
    """Generate customized OpenAPI schema for the API.

    Args:
        app: The FastAPI application instance.

    Returns:
        Customized OpenAPI schema dictionary.
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=API_DESCRIPTION,
        routes=app.routes,
    )

    openapi_schema["tags"] = [
        {
            "name": "Status",
            "description": "Health, version and authentication probes",
        },
        {
            "name": "CORS",
            "description": "Static CORS preflight answers",
        },
    ]

    components = openapi_schema.setdefault("components", {})
    components["securitySchemes"] = {
        "BearerAuth": {
            "type": "http",
            "scheme": "bearer",
            "description": "Static API token",
        },
    }

    secured = openapi_schema["paths"].get("/api/secured", {}).get("get")
    if secured is not None:
        secured["security"] = [{"BearerAuth": []}]

    app.openapi_schema = openapi_schema
    return app.openapi_schema


def configure_openapi(app: FastAPI) -> None:
    """Configure the FastAPI app to use custom OpenAPI schema.

    Args:
        app: The FastAPI application instance.
    """
    app.openapi = lambda: custom_openapi(app)  # type: ignore[method-assign]
