"""Upload endpoint: accepts files or URLs and relays them to the webhook."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from filerelay.application.use_cases.relay_upload import RelayUploadUseCase
from filerelay.domain.entities.uploaded_file import UploadedFile
from filerelay.domain.errors import PayloadTooLargeError, ValidationError
from filerelay.domain.models import RelayRequest, RelayResult, one_or_many
from filerelay.infrastructure.http.auth import require_api_key
from filerelay.infrastructure.http.dependencies import get_relay_use_case
from filerelay.infrastructure.settings import Settings, get_settings

router = APIRouter(dependencies=[Depends(require_api_key)])

FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")
URL_FIELDS = ("url", "url[]")
DEFAULT_UPLOAD_NAME = "file"


# ============================================================================
# Request parsing
# ============================================================================


async def parse_relay_request(request: Request, max_upload_bytes: int) -> RelayRequest:
    """
    Resolve the inbound body into a RelayRequest.

    Form bodies may carry ``file`` parts and/or ``url`` fields; JSON bodies
    carry ``url`` as a string or a list of strings. Blank URLs are dropped.
    """
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(FORM_CONTENT_TYPES):
        try:
            form = await request.form()
        except (MultiPartException, StarletteHTTPException) as e:
            raise ValidationError("Request body is not a valid form.") from e
        files = [
            await _read_upload(item, max_upload_bytes)
            for item in form.getlist("file")
            if isinstance(item, UploadFile)
        ]
        urls = [value for field in URL_FIELDS for value in form.getlist(field) if isinstance(value, str)]
        return RelayRequest(files=one_or_many(files), urls=one_or_many(_clean_urls(urls)))

    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError as e:
            raise ValidationError("Request body is not valid JSON.") from e
        url = body.get("url") if isinstance(body, dict) else None
        return RelayRequest(urls=one_or_many(_clean_urls(_coerce_urls(url))))

    return RelayRequest()


async def _read_upload(item: UploadFile, max_upload_bytes: int) -> UploadedFile:
    # never buffer more than limit + 1 bytes
    data = await item.read(max_upload_bytes + 1)
    if len(data) > max_upload_bytes:
        logger.warning(f"Rejected upload {item.filename!r}: more than {max_upload_bytes} bytes")
        raise PayloadTooLargeError("File size limit has been reached")
    return UploadedFile(name=item.filename or DEFAULT_UPLOAD_NAME, data=data)


def _coerce_urls(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return value
    raise ValidationError("The url field must be a string or a list of strings.")


def _clean_urls(urls: list[str]) -> list[str]:
    return [u.strip() for u in urls if u.strip()]


# ============================================================================
# Endpoint
# ============================================================================


@router.post("/upload")
async def upload(
    request: Request,
    use_case: RelayUploadUseCase = Depends(get_relay_use_case),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """
    Relay uploaded files, or files fetched from URLs, to the webhook.

    Returns 200 with the webhook's attachments, 400 when no input was
    given, 413 when an upload exceeds the size limit and 500 for any
    downstream failure.
    """
    try:
        relay_request = await parse_relay_request(request, settings.max_upload_bytes)
    except ValidationError as e:
        return JSONResponse(
            status_code=e.status_code,
            content=RelayResult(success=False, message=str(e)).to_payload(),
        )

    if relay_request.files is not None:
        logger.info(f"Upload received: {len(relay_request.files.items())} file(s)")
    elif relay_request.urls is not None:
        logger.info(f"Upload received: {len(relay_request.urls.items())} URL(s)")

    outcome = await use_case.handle(relay_request)
    return JSONResponse(status_code=outcome.status_code, content=outcome.result.to_payload())
