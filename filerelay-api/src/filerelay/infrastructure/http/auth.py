"""Shared-secret check on the x-api-key header."""

from __future__ import annotations

import secrets

from fastapi import Depends, Header, Request
from fastapi.responses import JSONResponse
from loguru import logger

from filerelay.domain.errors import InvalidApiKeyError
from filerelay.infrastructure.settings import Settings, get_settings

INVALID_API_KEY_BODY = {"message": "Invalid API key!"}


async def require_api_key(
    x_api_key: str | None = Header(default=None, alias="x-api-key"),
    settings: Settings = Depends(get_settings),
) -> None:
    """
    Reject the request unless x-api-key equals the configured API key.

    With no API_KEY configured the expected key is the empty string, so only
    a request that explicitly sends an empty header gets through.
    """
    expected = settings.expected_api_key
    if x_api_key is None or not secrets.compare_digest(
        x_api_key.encode("utf-8"), expected.encode("utf-8")
    ):
        logger.warning("Rejected request with invalid API key")
        raise InvalidApiKeyError()


async def invalid_api_key_handler(request: Request, exc: InvalidApiKeyError) -> JSONResponse:
    return JSONResponse(status_code=403, content=INVALID_API_KEY_BODY)
