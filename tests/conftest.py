# File: tests/conftest.py
import asyncio
import logging
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import pytest
from aiohttp import web

from link_crawler.config import CrawlerConfig
from link_crawler.crawler.fetcher import transport_for
from link_crawler.crawler.models import PageData
from link_crawler.errors import FetchError
from link_crawler.logger import LOGGER_NAME
from link_crawler.report.url_sink import UrlSink


def anchors(*urls: str) -> str:
    """Build a page body linking to *urls* with plain <a> tags."""
    return "".join(f'<a href="{u}">{u}</a>' for u in urls)


class FakeFetcher:
    """
    In-memory stand-in for Fetcher.

    Records ("start", url) / ("end", url) events so tests can check ordering,
    and tracks the largest number of fetches in flight at once.
    """

    def __init__(
        self,
        pages: Dict[str, str],
        failures: Iterable[str] = (),
        delays: Optional[Dict[str, float]] = None,
        default_delay: float = 0.01,
    ) -> None:
        self.pages = pages
        self.failures = set(failures)
        self.delays = delays or {}
        self.default_delay = default_delay
        self.events: List[Tuple[str, str]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch(self, url: str) -> Optional[PageData]:
        if transport_for(url) is None:
            return None
        self.events.append(("start", url))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(url, self.default_delay))
            if url in self.failures:
                raise FetchError(url, ConnectionRefusedError("refused"))
            return PageData(url, self.pages.get(url, ""))
        finally:
            self.in_flight -= 1
            self.events.append(("end", url))

    def started(self) -> List[str]:
        return [url for kind, url in self.events if kind == "start"]

    def index(self, kind: str, url: str) -> int:
        return self.events.index((kind, url))


@pytest.fixture()
def output_file(tmp_path: Path) -> Path:
    return tmp_path / "urls.txt"


@pytest.fixture()
def sink(output_file: Path) -> UrlSink:
    s = UrlSink(output_file)
    s.reset()
    return s


@pytest.fixture()
def make_config(output_file: Path) -> Callable[..., CrawlerConfig]:
    """Factory for CrawlerConfig writing into the test's tmp dir."""

    def _make(**overrides) -> CrawlerConfig:
        values = {"seed_url": "http://a.test/", "output_file": output_file, "timeout": 2.0}
        values.update(overrides)
        return CrawlerConfig(**values)

    return _make


@pytest.fixture()
def crawl_log(caplog):
    """The project logger does not propagate; attach caplog's handler directly."""
    lg = logging.getLogger(LOGGER_NAME)
    lg.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    yield caplog
    lg.removeHandler(caplog.handler)


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()
