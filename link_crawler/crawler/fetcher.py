# link_crawler/crawler/fetcher.py
"""
Fetcher module: one plain GET per URL, transport picked from the URL prefix.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

from aiohttp import ClientError, ClientResponse, ClientSession

from link_crawler.crawler.models import PageData
from link_crawler.errors import FetchError

SECURE_PREFIX = "https:"
PLAIN_PREFIX = "http:"

logger = logging.getLogger("LinkCrawler")


def transport_for(url: str) -> Optional[str]:
    """Return ``"https"``, ``"http"`` or ``None`` when *url* is not fetchable."""
    if url.startswith(SECURE_PREFIX):
        return "https"
    if url.startswith(PLAIN_PREFIX):
        return "http"
    return None


def _decode(resp: ClientResponse, body: bytes) -> str:
    charset = resp.charset or "utf-8"
    try:
        return body.decode(charset, errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")


class Fetcher:
    """Retrieves page bodies; status codes are not inspected."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> PageData | None:
        """
        Fetch *url* and return its body.

        Returns None when the URL has no http(s) prefix. Raises FetchError on
        connection failure or timeout.
        """
        logger.info("Visiting %s", url)
        transport = transport_for(url)
        if transport is None:
            logger.debug("Skipping %s: unsupported scheme", url)
            return None

        logger.debug("GET %s over %s", url, transport)
        try:
            async with self.session.get(url, allow_redirects=False) as resp:
                body = await resp.read()
                return PageData(url, _decode(resp, body))
        except (ClientError, asyncio.TimeoutError, ValueError) as exc:
            raise FetchError(url, exc) from exc
