"""
Bearer token authentication for secured endpoints.

Endpoints opt in by depending on ``require_authenticated``; the handlers
themselves never inspect credentials.
"""

import secrets
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status
from loguru import logger

from btpxpress.config import Settings, get_settings


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def is_valid_token(token: str, accepted_tokens: list[str]) -> bool:
    """
    Check a bearer token against the accepted tokens in constant time.

    Args:
        token: Token presented by the caller.
        accepted_tokens: Tokens configured for the service.

    Returns:
        True if the token matches one of the accepted tokens.
    """
    matched = False
    for candidate in accepted_tokens:
        if secrets.compare_digest(token.encode(), candidate.encode()):
            matched = True
    return matched


def require_authenticated(
    settings: Annotated[Settings, Depends(get_settings)],
    authorization: Annotated[str | None, Header()] = None,
) -> str:
    """
    Reject the request unless it carries a valid bearer token.

    Args:
        settings: Application settings.
        authorization: Authorization header with Bearer token.

    Returns:
        str: The accepted token.

    Raises:
        HTTPException: 401 if the header is missing, malformed or unknown.
    """
    if not authorization:
        logger.warning("Secured request missing Authorization header")
        raise _unauthorized("Missing Authorization header")

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        logger.warning("Secured request with invalid Authorization format")
        raise _unauthorized(
            "Invalid Authorization header format. Expected: Bearer <token>"
        )

    token = parts[1]
    if not is_valid_token(token, settings.get_api_tokens()):
        logger.warning("Secured request with invalid API token")
        raise _unauthorized("Invalid API token")

    return token
