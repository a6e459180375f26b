"""FastAPI dependency providers wiring settings into the relay pipeline."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from filerelay.application.ports.http_transport import HttpTransport
from filerelay.application.services import FileNormalizer, RemoteFetcher, WebhookRelay
from filerelay.application.use_cases.relay_upload import RelayUploadUseCase
from filerelay.infrastructure.http.client import HttpxTransport
from filerelay.infrastructure.settings import Settings, get_settings


@lru_cache
def get_http_transport() -> HttpTransport:
    """Get the shared (stateless) outbound transport."""
    return HttpxTransport()


def get_relay_use_case(
    settings: Settings = Depends(get_settings),
    transport: HttpTransport = Depends(get_http_transport),
) -> RelayUploadUseCase:
    """Build the use case per request; settings are read at call time."""
    return RelayUploadUseCase(
        fetcher=RemoteFetcher(transport),
        normalizer=FileNormalizer(),
        relay=WebhookRelay(transport, settings.webhook_url),
    )
