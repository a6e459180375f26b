"""Shared fixtures: a deterministic outbound transport and app wiring."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from filerelay.api.main import create_app
from filerelay.domain.errors import TransportError
from filerelay.infrastructure.http.dependencies import get_http_transport
from filerelay.infrastructure.settings import Settings

WEBHOOK_URL = "https://discord.test/api/webhooks/123/token?wait=true"
API_KEY = "test-api-key"


class FakeTransport:
    """
    In-memory HttpTransport.

    GETs return ``b"content of <url>"`` unless the URL is listed in
    ``failing_urls``. POSTs answer with one attachment per multipart field
    unless ``webhook_response`` or ``webhook_error`` is set.
    """

    def __init__(
        self,
        failing_urls: set[str] | None = None,
        webhook_response: Any = None,
        webhook_error: Exception | None = None,
    ):
        self.failing_urls = failing_urls or set()
        self.webhook_response = webhook_response
        self.webhook_error = webhook_error
        self.get_calls: list[str] = []
        self.post_calls: list[tuple[str, list]] = []

    async def get_bytes(self, url: str) -> bytes:
        self.get_calls.append(url)
        if url in self.failing_urls:
            raise TransportError("HTTP 404 from GET", status_code=404)
        return f"content of {url}".encode()

    async def post_multipart(self, url: str, fields: list) -> Any:
        self.post_calls.append((url, fields))
        if self.webhook_error is not None:
            raise self.webhook_error
        if self.webhook_response is not None:
            return self.webhook_response
        return {
            "id": "msg-1",
            "attachments": [
                {
                    "id": f"att-{i}",
                    "filename": name,
                    "size": len(data),
                    "url": f"https://cdn.discord.test/attachments/{name}",
                    "proxy_url": f"https://media.discord.test/attachments/{name}",
                }
                for i, (_, (name, data)) in enumerate(fields)
            ],
        }


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        api_key=API_KEY,
        discord_webhook_url=WEBHOOK_URL,
    )


def make_client(settings: Settings, transport: FakeTransport) -> TestClient:
    app = create_app(settings)
    app.dependency_overrides[get_http_transport] = lambda: transport
    return TestClient(app)


@pytest.fixture
def client(settings: Settings, transport: FakeTransport) -> TestClient:
    return make_client(settings, transport)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"x-api-key": API_KEY}
