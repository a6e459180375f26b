"""Use case behind POST /upload: validate, gather files, relay them."""

from __future__ import annotations

from loguru import logger

from filerelay.application.services.file_normalizer import FileNormalizer
from filerelay.application.services.remote_fetcher import RemoteFetcher
from filerelay.application.services.webhook_relay import WebhookRelay
from filerelay.domain.entities.attachment import AttachmentDescriptor
from filerelay.domain.entities.uploaded_file import UploadedFile
from filerelay.domain.errors import FileRelayError
from filerelay.domain.models import Many, RelayOutcome, RelayRequest, RelayResult, Single

MISSING_INPUT_MESSAGE = "Please specify files or URLs for upload."
SUCCESS_MESSAGE = "File uploaded successfully"


class RelayUploadUseCase:
    """
    Relay an upload request to the webhook.

    Flow:
    1. Reject requests with neither files nor URLs (400, nothing else runs)
    2. Direct files present: normalize them. URLs are ignored in that case,
       direct files always take precedence.
    3. Only URLs present: fetch them (concurrently when several)
    4. Relay the files and return the webhook's attachments (200)

    Any FileRelayError raised along the way becomes a failure envelope
    carrying the error's status; there is no partial success.
    """

    def __init__(
        self,
        fetcher: RemoteFetcher,
        normalizer: FileNormalizer,
        relay: WebhookRelay,
    ):
        self.fetcher = fetcher
        self.normalizer = normalizer
        self.relay = relay

    async def handle(self, request: RelayRequest) -> RelayOutcome:
        if request.is_empty:
            logger.info("Upload rejected: no files or URLs provided")
            return RelayOutcome(
                status_code=400,
                result=RelayResult(success=False, message=MISSING_INPUT_MESSAGE),
            )

        try:
            files = await self._collect_files(request)
            attachments: list[AttachmentDescriptor] = await self.relay.relay(files)
        except FileRelayError as e:
            logger.error(f"Upload failed ({type(e).__name__}): {e}")
            return RelayOutcome(
                status_code=e.status_code,
                result=RelayResult(success=False, error=str(e)),
            )

        return RelayOutcome(
            status_code=200,
            result=RelayResult(success=True, message=SUCCESS_MESSAGE, attachments=attachments),
        )

    async def _collect_files(self, request: RelayRequest) -> list[UploadedFile]:
        if request.files is not None:
            if request.urls is not None:
                logger.warning(
                    f"Both files and URLs submitted; ignoring {len(request.urls.items())} URL(s)"
                )
            return self.normalizer.normalize(request.files)

        urls = request.urls
        if isinstance(urls, Single):
            return [await self.fetcher.fetch(urls.value)]
        if isinstance(urls, Many):
            return await self.fetcher.fetch_many(urls.items())
        # is_empty was checked by the caller
        raise AssertionError("unreachable: request has neither files nor URLs")
