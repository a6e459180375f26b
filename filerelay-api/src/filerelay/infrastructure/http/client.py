"""httpx implementation of the HttpTransport port."""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from filerelay.application.ports.http_transport import MultipartField
from filerelay.domain.errors import TransportError


class HttpxTransport:
    """
    Outbound HTTP over httpx.AsyncClient.

    Each call opens its own client, so concurrent requests share nothing.
    Timeouts are httpx's defaults. ``transport`` lets tests plug in an
    ``httpx.MockTransport``.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self._transport, follow_redirects=True)

    async def get_bytes(self, url: str) -> bytes:
        try:
            async with self._client() as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.content
        except httpx.TimeoutException as e:
            raise TransportError(f"GET timed out: {e}") from e
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"HTTP {e.response.status_code} from GET",
                status_code=e.response.status_code,
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"GET failed: {e}") from e

    async def post_multipart(self, url: str, fields: list[MultipartField]) -> Any:
        try:
            async with self._client() as client:
                response = await client.post(url, files=fields)
                if response.status_code >= 400:
                    logger.debug(f"Webhook error body: {response.text[:200]}")
                response.raise_for_status()
                return response.json()
        except httpx.TimeoutException as e:
            raise TransportError(f"POST timed out: {e}") from e
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"HTTP {e.response.status_code}: {e.response.text[:200]}",
                status_code=e.response.status_code,
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"POST failed: {e}") from e
        except ValueError as e:
            raise TransportError(f"Response body is not valid JSON: {e}") from e
