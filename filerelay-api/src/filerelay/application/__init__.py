"""Application layer - relay services and use cases."""

from filerelay.application.services import (
    FileNormalizer,
    RemoteFetcher,
    WebhookRelay,
)
from filerelay.application.use_cases.relay_upload import RelayUploadUseCase

__all__ = [
    "FileNormalizer",
    "RemoteFetcher",
    "WebhookRelay",
    "RelayUploadUseCase",
]
