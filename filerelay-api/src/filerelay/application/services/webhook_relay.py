"""Forwards files to the configured webhook as a multipart request."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlsplit

from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from filerelay.application.ports.http_transport import HttpTransport, MultipartField
from filerelay.domain.entities.attachment import AttachmentDescriptor
from filerelay.domain.entities.uploaded_file import UploadedFile
from filerelay.domain.errors import ConfigurationError, RelayError, TransportError


def multipart_fields(files: list[UploadedFile]) -> list[MultipartField]:
    """
    Build the multipart fields for a batch of files.

    The webhook accepts a lone ``file`` part, or ``files[0]``, ``files[1]``,
    ... for several files. Which shape is used depends only on the count.
    """
    if len(files) == 1:
        f = files[0]
        return [("file", (f.name, f.data))]
    return [(f"files[{i}]", (f.name, f.data)) for i, f in enumerate(files)]


def redact_url(url: str) -> str:
    """Host only; webhook URLs embed their token in the path."""
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}/..." if parts.netloc else "<invalid url>"


class WebhookRelay:
    """Relays uploaded files to the webhook and returns its attachment list."""

    def __init__(self, transport: HttpTransport, webhook_url: str | None):
        self.transport = transport
        self.webhook_url = webhook_url

    async def relay(self, files: list[UploadedFile]) -> list[AttachmentDescriptor]:
        """
        POST ``files`` to the webhook in a single request.

        Raises:
            ConfigurationError: no webhook URL is configured (checked before
                any network call).
            RelayError: the POST failed, the body was not JSON, or it held no
                attachments.
        """
        if not self.webhook_url:
            raise ConfigurationError(
                "Missing webhook endpoint: set DISCORD_WEBHOOK_URL in the environment or .env file."
            )

        fields = multipart_fields(files)
        target = redact_url(self.webhook_url)
        logger.info(f"Relaying {len(files)} file(s) to {target}")

        try:
            data = await self.transport.post_multipart(self.webhook_url, fields)
        except TransportError as e:
            logger.error(f"Webhook relay to {target} failed: {e}")
            raise RelayError(f"Webhook request failed: {e}") from e

        attachments = _extract_attachments(data)
        if not attachments:
            logger.error(f"Webhook at {target} returned no attachments")
            raise RelayError("No attachments found in the webhook response.")

        try:
            descriptors = [AttachmentDescriptor.model_validate(a) for a in attachments]
        except PydanticValidationError as e:
            raise RelayError(f"Malformed attachment in webhook response: {e}") from e

        logger.info(f"Webhook stored {len(descriptors)} attachment(s)")
        return descriptors


def _extract_attachments(data: Any) -> list[Any]:
    if not isinstance(data, dict):
        return []
    attachments = data.get("attachments")
    if not isinstance(attachments, list):
        return []
    return attachments
