# cli.py

"""
Launcher for running LinkCrawler from a source checkout.

Example:
    python cli.py https://example.com --output urls.txt
"""
from link_crawler.cli import cli


if __name__ == '__main__':
    cli()
