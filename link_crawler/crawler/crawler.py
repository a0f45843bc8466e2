# link_crawler/crawler/crawler.py
from __future__ import annotations

import asyncio
import contextlib
import logging
import time
from typing import AsyncContextManager, Optional, Protocol

from aiohttp import ClientSession, ClientTimeout

from link_crawler.config import CrawlerConfig
from link_crawler.crawler.fetcher import Fetcher
from link_crawler.crawler.link_extractor import extract_links
from link_crawler.crawler.models import CrawlStats, InvocationState, PageData
from link_crawler.crawler.scheduler import BatchScheduler
from link_crawler.crawler.visited import VisitedSet
from link_crawler.errors import FetchError
from link_crawler.report.url_sink import UrlSink

__all__ = ("AsyncCrawler", "PageFetcher")


class PageFetcher(Protocol):
    async def fetch(self, url: str) -> Optional[PageData]: ...


class AsyncCrawler:
    """
    Recursive crawler: fetch, extract, claim new links, record them, then
    crawl the new links batch by batch.

    Each invocation finishes only after all of its descendants have. A fetch
    failure ends that branch with no children; a sink failure propagates.
    """

    def __init__(
        self,
        config: CrawlerConfig,
        sink: UrlSink,
        fetcher: Optional[PageFetcher] = None,
        visited: Optional[VisitedSet] = None,
    ) -> None:
        self.config = config
        self.sink = sink
        self.fetcher = fetcher
        self.visited = visited if visited is not None else VisitedSet()
        self.scheduler = BatchScheduler(config.batch_size)
        self.stats = CrawlStats()
        self.session: Optional[ClientSession] = None
        self.logger = logging.getLogger("LinkCrawler")
        self._slots: Optional[asyncio.Semaphore] = (
            asyncio.Semaphore(config.max_concurrency) if config.max_concurrency else None
        )

    async def __aenter__(self) -> AsyncCrawler:
        if self.fetcher is None:
            self.session = ClientSession(timeout=ClientTimeout(total=self.config.timeout))
            self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self, seed: Optional[str] = None) -> CrawlStats:
        """Crawl everything reachable from *seed* (or the configured seed)."""
        seed = seed or self.config.seed_url
        if not seed:
            raise ValueError("Initial URL not provided")
        if self.fetcher is None:
            raise RuntimeError("Fetcher not initialized; use 'async with AsyncCrawler(...)'")

        self.logger.info("Starting crawl: %s", seed)
        start = time.monotonic()
        self.visited.claim([seed])
        await self._crawl(seed)
        duration = time.monotonic() - start
        self.logger.info("Execution completed.")
        self.logger.info("Finished in %.2f s: %s", duration, self.stats.summary())
        return self.stats

    async def _crawl(self, url: str) -> None:
        self._enter(url, InvocationState.FETCHING)
        try:
            async with self._fetch_slot():
                page = await self.fetcher.fetch(url)  # type: ignore[union-attr]
        except FetchError as e:
            self.stats.fetch_errors += 1
            self.logger.warning("Failed %s: %s", url, e.cause)
            self._enter(url, InvocationState.DONE)
            return

        if page is None:
            self.stats.pages_skipped += 1
            links = []
        else:
            self.stats.pages_fetched += 1
            self._enter(url, InvocationState.EXTRACTING)
            links = extract_links(page.content)

        self._enter(url, InvocationState.FILTERING)
        fresh = self.visited.claim(links)
        if not fresh:
            self._enter(url, InvocationState.IDLE)
            self._enter(url, InvocationState.DONE)
            return

        self._enter(url, InvocationState.PERSISTING)
        self.sink.append(fresh)
        self.stats.records_written += 1
        self.stats.links_discovered += len(fresh)

        self._enter(url, InvocationState.SCHEDULING)
        self.logger.debug("%s: %d new link(s)", url, len(fresh))
        self._enter(url, InvocationState.WAITING_ON_CHILDREN)
        await self.scheduler.run(fresh, self._crawl)
        self._enter(url, InvocationState.DONE)

    def _fetch_slot(self) -> AsyncContextManager:
        return self._slots if self._slots is not None else contextlib.nullcontext()

    def _enter(self, url: str, state: InvocationState) -> None:
        self.logger.debug("%s -> %s", url, state.value)
