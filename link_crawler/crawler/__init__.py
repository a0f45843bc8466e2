# link_crawler/crawler/__init__.py
"""Crawl engine and its collaborators."""

from link_crawler.crawler.crawler import AsyncCrawler
from link_crawler.crawler.models import CrawlStats, InvocationState, PageData
from link_crawler.crawler.scheduler import BatchScheduler, batchify
from link_crawler.crawler.visited import VisitedSet

__all__ = [
    "AsyncCrawler",
    "BatchScheduler",
    "CrawlStats",
    "InvocationState",
    "PageData",
    "VisitedSet",
    "batchify",
]
