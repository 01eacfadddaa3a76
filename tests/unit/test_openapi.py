"""Tests for OpenAPI schema customization."""

from fastapi import FastAPI

from btpxpress.application import create_app
from btpxpress.openapi import custom_openapi


def test_custom_openapi_documents_endpoints():
    """Test the schema lists the API paths and tags."""
    schema = custom_openapi(create_app())

    assert "/api/health" in schema["paths"]
    assert "/api/version" in schema["paths"]
    assert {tag["name"] for tag in schema["tags"]} == {"Status", "CORS"}


def test_custom_openapi_marks_secured_endpoint():
    """Test the secured endpoint requires bearer auth."""
    schema = custom_openapi(create_app())

    assert schema["components"]["securitySchemes"]["BearerAuth"]["scheme"] == "bearer"
    assert schema["paths"]["/api/secured"]["get"]["security"] == [{"BearerAuth": []}]
    assert "security" not in schema["paths"]["/api/health"]["get"]


def test_custom_openapi_caches_schema():
    """Test the schema is generated once."""
    app = FastAPI(version="1.0.0")

    assert custom_openapi(app) is custom_openapi(app)


def test_configure_openapi_is_installed():
    """Test create_app wires the custom generator."""
    app = create_app()

    assert app.openapi() is custom_openapi(app)
