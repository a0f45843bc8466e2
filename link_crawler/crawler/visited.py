# link_crawler/crawler/visited.py
"""
Process-wide record of every reference ever accepted for crawling.
"""
from __future__ import annotations

import threading
from typing import Dict, Iterable, Iterator, List, Optional


class VisitedSet:
    """
    First-claim dedup store.

    A reference is inserted once, when :meth:`claim` first sees it, and is
    never removed. ``claim`` does not await, so on one event loop it cannot
    interleave with another invocation's claim; the lock keeps the same
    guarantee when the set is shared between threads.
    """

    def __init__(self) -> None:
        self._seen: Dict[str, bool] = {}
        self._lock = threading.Lock()

    def claim(self, references: Iterable[Optional[str]]) -> List[str]:
        """Mark *references* as visited and return those that were new, in order."""
        fresh: List[str] = []
        with self._lock:
            for ref in references:
                if ref is None or ref in self._seen:
                    continue
                self._seen[ref] = True
                fresh.append(ref)
        return fresh

    def __contains__(self, ref: object) -> bool:
        return ref in self._seen

    def __len__(self) -> int:
        return len(self._seen)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._seen))
