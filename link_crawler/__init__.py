# link_crawler/__init__.py
"""
LinkCrawler package initializer.
Defines package version; the command line lives in :mod:`link_crawler.cli`.
"""
__version__ = "0.1.0"
