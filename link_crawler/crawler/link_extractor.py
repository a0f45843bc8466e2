# link_crawler/crawler/link_extractor.py
"""
Reference extraction for LinkCrawler.

Attribute values are returned verbatim: no joining against the page URL,
no scheme filtering, no normalization.
"""
from __future__ import annotations

from typing import List, Optional, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

from link_crawler.crawler.models import NO_URL


def _attr(tag: Tag, name: str) -> Optional[str]:
    value = tag.get(name)
    if value is None:
        return NO_URL
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def extract_links(content: Union[str, bytes]) -> List[Optional[str]]:
    """
    Extract candidate references from markup, in document-independent order:

    1. ``href`` of every ``<a>`` (``NO_URL`` when absent),
    2. ``href`` of every ``<link>`` (``NO_URL`` when absent),
    3. ``src`` of every ``<script>`` that has one.

    Duplicates are kept; deduplication happens in the visited set.
    """
    soup = BeautifulSoup(content, "html.parser")
    links: List[Optional[str]] = []
    for name in ("a", "link"):
        for tag in soup.find_all(name):
            if isinstance(tag, Tag):
                links.append(_attr(tag, "href"))
    for tag in soup.find_all("script", src=True):
        if isinstance(tag, Tag):
            links.append(_attr(tag, "src"))
    return links
