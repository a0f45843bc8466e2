# link_crawler/report/url_sink.py

"""
Append-only text file of discovered links.

Each crawl invocation that found new links appends one record: the links
joined by newlines, terminated by a newline.
"""
from pathlib import Path
from typing import Sequence, Union

from link_crawler.errors import PersistenceError


class UrlSink:
    """Writes discovered-link records to *path*."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def reset(self) -> Path:
        """Start from an empty file, creating parent directories if needed."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("", encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(self.path, exc) from exc
        return self.path

    def append(self, links: Sequence[str]) -> None:
        """Append one record in a single write; empty input writes nothing."""
        if not links:
            return
        record = "\n".join(links) + "\n"
        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(record)
        except OSError as exc:
            raise PersistenceError(self.path, exc) from exc
