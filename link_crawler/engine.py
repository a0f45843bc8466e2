# link_crawler/engine.py
"""link_crawler.engine: one-call entry point used by the command line."""

from __future__ import annotations

from link_crawler.config import CrawlerConfig
from link_crawler.crawler.crawler import AsyncCrawler
from link_crawler.crawler.models import CrawlStats
from link_crawler.logger import logger
from link_crawler.report.url_sink import UrlSink

__all__ = ["start_crawl"]


async def start_crawl(cfg: CrawlerConfig) -> CrawlStats:
    """
    Clear the output file, crawl from ``cfg.seed_url`` and return the stats.

    Parameters
    ----------
    cfg : CrawlerConfig
        Settings of the run; ``seed_url`` must be set.

    Returns
    -------
    CrawlStats
        Counters of the finished crawl.
    """
    sink = UrlSink(cfg.output_file)
    sink.reset()
    logger.debug("Writing discovered links to %s", sink.path)
    async with AsyncCrawler(cfg, sink) as crawler:
        return await crawler.crawl()
