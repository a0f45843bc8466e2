# link_crawler/report/__init__.py
"""link_crawler.report: output destinations for crawl results."""

from link_crawler.report.url_sink import UrlSink

__all__ = ["UrlSink"]
