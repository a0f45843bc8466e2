# link_crawler/errors.py
"""
Exceptions raised by the LinkCrawler library code.

Only the command line turns them into exit codes.
"""
from __future__ import annotations

from pathlib import Path
from typing import Union


class CrawlerError(Exception):
    """Base class for LinkCrawler errors."""


class FetchError(CrawlerError):
    """A URL could not be retrieved (connection failure, timeout)."""

    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(f"failed to fetch {url}: {cause!r}")
        self.url = url
        self.cause = cause


class PersistenceError(CrawlerError):
    """Discovered links could not be written to the output file."""

    def __init__(self, path: Union[str, Path], cause: BaseException) -> None:
        super().__init__(f"cannot write to {path}: {cause}")
        self.path = Path(path)
        self.cause = cause
