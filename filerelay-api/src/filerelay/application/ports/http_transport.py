from __future__ import annotations
from typing import Any, Protocol

# (field name, (filename, content)) as accepted by a multipart encoder
MultipartField = tuple[str, tuple[str, bytes]]


class HttpTransport(Protocol):
    """Outbound HTTP capability used by the fetcher and the webhook relay.

    Implementations raise TransportError on network failure, timeout or a
    non-2xx response.
    """

    async def get_bytes(self, url: str) -> bytes: ...

    async def post_multipart(self, url: str, fields: list[MultipartField]) -> Any: ...
