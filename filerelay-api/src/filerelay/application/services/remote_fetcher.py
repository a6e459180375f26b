"""Downloads remote files into memory so they can be relayed."""

from __future__ import annotations

import asyncio
import re

from loguru import logger

from filerelay.application.ports.http_transport import HttpTransport
from filerelay.domain.entities.uploaded_file import UploadedFile
from filerelay.domain.errors import FetchError, TransportError

_QUERY_OR_FRAGMENT = re.compile(r"[?#].*$")

DEFAULT_FILENAME = "file"


def filename_from_url(url: str) -> str:
    """
    Derive a filename from the last path segment of a URL.

    Anything from the first ``?`` or ``#`` onwards is stripped, so
    ``https://host/path/name.png?x=1`` becomes ``name.png``. A URL ending in
    ``/`` has no usable segment and falls back to ``DEFAULT_FILENAME``.
    """
    name = url[url.rfind("/") + 1:]
    name = _QUERY_OR_FRAGMENT.sub("", name)
    return name or DEFAULT_FILENAME


class RemoteFetcher:
    """Fetches URLs through an HttpTransport, buffering each body fully."""

    def __init__(self, transport: HttpTransport):
        self.transport = transport

    async def fetch(self, url: str) -> UploadedFile:
        """Download one URL. Raises FetchError on any failure; no retries."""
        try:
            data = await self.transport.get_bytes(url)
        except TransportError as e:
            logger.warning(f"Fetch failed for {url}: {e}")
            raise FetchError(f"Failed to fetch {url}: {e}", url=url) from e

        name = filename_from_url(url)
        logger.debug(f"Fetched {url} as {name!r} ({len(data)} bytes)")
        return UploadedFile(name=name, data=data)

    async def fetch_many(self, urls: list[str]) -> list[UploadedFile]:
        """
        Download all URLs concurrently, preserving input order.

        Fail-fast: the first failure is raised and the results of the other
        fetches are discarded.
        """
        return list(await asyncio.gather(*(self.fetch(url) for url in urls)))
