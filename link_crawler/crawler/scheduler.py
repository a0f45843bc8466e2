# link_crawler/crawler/scheduler.py
"""
Batch scheduling: sequential groups, concurrent within a group.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, List, Sequence, TypeVar

from link_crawler.config import DEFAULT_BATCH_SIZE

T = TypeVar("T")

logger = logging.getLogger("LinkCrawler")


def batchify(items: Sequence[T], batch_size: int = DEFAULT_BATCH_SIZE) -> List[List[T]]:
    """Split *items* into contiguous groups of at most *batch_size*, keeping order."""
    if batch_size < 1:
        raise ValueError("batch_size must be >= 1")
    return [list(items[i:i + batch_size]) for i in range(0, len(items), batch_size)]


class BatchScheduler:
    """
    Runs one worker per item, *batch_size* at a time.

    Group ``i + 1`` starts only after every worker of group ``i`` has
    returned. Inside a group the workers are separate tasks, created in
    listed order, that finish in any order.
    """

    def __init__(self, batch_size: int = DEFAULT_BATCH_SIZE) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be >= 1")
        self.batch_size = batch_size

    async def run(self, items: Sequence[T], worker: Callable[[T], Awaitable[None]]) -> None:
        batches = batchify(items, self.batch_size)
        for index, batch in enumerate(batches, start=1):
            logger.debug("Batch %d/%d: %d item(s)", index, len(batches), len(batch))
            await asyncio.gather(*(worker(item) for item in batch))
