# link_crawler/crawler/models.py
"""
Data models for the LinkCrawler crawler.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

#: what the extractor yields for an <a> or <link> without href
NO_URL: Optional[str] = None


@dataclass(slots=True)
class PageData:
    """Holds the requested URL and the decoded body of a fetched page."""

    url: str
    content: str


class InvocationState(str, Enum):
    """Lifecycle of one crawl invocation."""

    FETCHING = "fetching"
    EXTRACTING = "extracting"
    FILTERING = "filtering"
    IDLE = "idle"
    PERSISTING = "persisting"
    SCHEDULING = "scheduling"
    WAITING_ON_CHILDREN = "waiting_on_children"
    DONE = "done"


@dataclass(slots=True)
class CrawlStats:
    """Counters collected during one crawl."""

    pages_fetched: int = 0
    pages_skipped: int = 0
    fetch_errors: int = 0
    links_discovered: int = 0
    records_written: int = 0

    def summary(self) -> str:
        return (
            f"fetched={self.pages_fetched} skipped={self.pages_skipped} "
            f"errors={self.fetch_errors} discovered={self.links_discovered} "
            f"records={self.records_written}"
        )
