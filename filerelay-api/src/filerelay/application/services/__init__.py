"""Relay pipeline services."""

from filerelay.application.services.file_normalizer import FileNormalizer
from filerelay.application.services.remote_fetcher import RemoteFetcher, filename_from_url
from filerelay.application.services.webhook_relay import WebhookRelay, multipart_fields

__all__ = [
    "FileNormalizer",
    "RemoteFetcher",
    "filename_from_url",
    "WebhookRelay",
    "multipart_fields",
]
