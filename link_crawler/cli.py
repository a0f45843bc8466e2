# link_crawler/cli.py
#!/usr/bin/env python3
"""
Command-line entry point for LinkCrawler.

Usage:
  link-crawler [OPTIONS] SEED_URL

Options:
  --config PATH         YAML/JSON config file (seed_url may be set there)
  --batch-size INT      Links crawled concurrently per page (default: 5)
  --output PATH         File receiving discovered links (default: ./urls.txt)
  --timeout SEC         Per-request timeout
  --max-concurrency N   Global cap on in-flight fetches
  --crawl-timeout SEC   Abort the whole crawl after SEC seconds
  --log-level LEVEL     Logging level (DEBUG, INFO, ...)
  --log-file PATH       Log file (stdout only if omitted)
  --log-format FORMAT   Logging format string
  --version, -v         Show the LinkCrawler version

Example:
  link-crawler https://example.com --batch-size 10 -o crawl/urls.txt
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from link_crawler import __version__
from link_crawler.config import build_config
from link_crawler.engine import start_crawl
from link_crawler.errors import PersistenceError
from link_crawler.logger import DEFAULT_FORMAT, init_logging

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='LinkCrawler, version %(version)s')
@click.argument('seed_url', required=False)
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='YAML or JSON configuration file.'
)
@click.option(
    '--batch-size', '-b', 'batch_size',
    type=click.IntRange(min=1),
    default=None,
    help='Links crawled concurrently per page [default: 5]'
)
@click.option(
    '--output', '-o', 'output_file',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='File receiving discovered links [default: ./urls.txt]'
)
@click.option(
    '--timeout', 'timeout',
    type=float,
    default=None,
    help='Per-request timeout in seconds [default: 30]'
)
@click.option(
    '--max-concurrency', 'max_concurrency',
    type=click.IntRange(min=1),
    default=None,
    help='Global cap on in-flight fetches (unbounded if unset)'
)
@click.option(
    '--crawl-timeout', 'crawl_timeout',
    type=float,
    default=None,
    help='Abort the whole crawl after this many seconds'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Log file (stdout only if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Logging format string'
)
def cli(seed_url, config_path, batch_size, output_file, timeout, max_concurrency,
        crawl_timeout, log_level, log_file, log_format):
    """Crawl every link reachable from SEED_URL and record the new ones."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = build_config(
            config_path,
            seed_url=seed_url,
            batch_size=batch_size,
            output_file=output_file,
            timeout=timeout,
            max_concurrency=max_concurrency,
        )
    except (OSError, ValueError, TypeError, ValidationError) as e:
        print_error(f'Failed to load configuration: {e}')

    if not cfg.seed_url:
        print_error('Initial URL not provided')

    try:
        if crawl_timeout:
            stats = asyncio.run(
                asyncio.wait_for(start_crawl(cfg), timeout=crawl_timeout)
            )
        else:
            stats = asyncio.run(start_crawl(cfg))
    except asyncio.TimeoutError:
        print_error(f'Crawl did not finish within {crawl_timeout} seconds')
    except PersistenceError as e:
        print_error(f'Cannot save discovered links: {e}')

    click.echo(f'Execution completed. {stats.summary()}')
    click.echo(f'Discovered links: {cfg.output_file}')


if __name__ == "__main__":
    cli()
