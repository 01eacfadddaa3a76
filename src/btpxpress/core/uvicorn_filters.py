"""
Custom logging filters for Uvicorn to reduce noise in logs.
"""

import logging


class HealthCheckFilter(logging.Filter):
    """
    Filter to exclude health probe requests from the Uvicorn access log.
    """

    EXCLUDED_PATHS = {"/api/health", "/favicon.ico"}

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Determine if a log record should be logged.

        Uvicorn access lines look like:
            10.0.12.168:43306 - "GET /api/health HTTP/1.1" 200

        Args:
            record: Log record from Uvicorn

        Returns:
            False if the request path should be excluded, True otherwise
        """
        message = record.getMessage()

        for path in self.EXCLUDED_PATHS:
            if f" {path} " in message or f" {path}?" in message:
                return False

        return True
