"""
Main FastAPI application entry point.

Run with:
    uvicorn btpxpress.main:app
or:
    python -m btpxpress.main
"""

from btpxpress.app_setup import add_root_endpoint
from btpxpress.application import create_app
from btpxpress.config import get_settings
from btpxpress.core.logging import intercept_standard_logging

# Intercept logs from uvicorn and other libraries
intercept_standard_logging()

app = create_app()

add_root_endpoint(app)


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "btpxpress.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_config=None,
    )
