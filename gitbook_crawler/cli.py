# === FILE: gitbook_crawler/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point of gitbook-crawler.

Loads the root page of a sidebar-navigated documentation site, collects every
link of its navigation panel and saves the main content of each page as
``<output-dir>/<link>.html``.

Arguments:
  URL                          Root URL to crawl

Options:
  --executable, -e PATH        Browser executable (Playwright's Chromium if unset)
  --output-dir, -o DIR         Output directory (discovery only if unset)
  --headless BOOL              Run the browser headless (default: true)
  --ignore-external-links BOOL Skip off-site links instead of failing (default: true)
  --config, -c PATH            YAML/JSON file with default settings
  --main-selector CSS          Content region selector (default: main)
  --sidebar-selector CSS       Navigation panel selector (default: aside)
  --nav-timeout SEC            Timeout of one navigation or query
  --crawl-timeout SEC          Timeout of the whole crawl
  --pretty                     Indent the JSON printed in discovery-only mode
  --log-level LEVEL            Logging level (DEBUG, INFO, ...)
  --log-file PATH              Log file (stderr only if unset)
  --log-format FORMAT          Logging format string
  --version, -v                Show the version

Example:
  gitbook-crawler https://docs.example.com --output-dir ./docs-dump
"""
import asyncio
import json
import sys
from pathlib import Path

import click

from gitbook_crawler import __version__
from gitbook_crawler.config import build_config
from gitbook_crawler.engine import start_crawl
from gitbook_crawler.errors import CrawlError
from gitbook_crawler.logger import DEFAULT_FORMAT, init_logging

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='gitbook-crawler, version %(version)s')
@click.argument('url')
@click.option(
    '--executable', '-e', 'executable',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Path to the browser executable (default: Playwright Chromium)'
)
@click.option(
    '--output-dir', '-o', 'output_dir',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Directory to save the output (discovery only if unset)'
)
@click.option(
    '--headless', 'headless',
    type=click.BOOL,
    default=None,
    help='Headless mode (default: true)'
)
@click.option(
    '--ignore-external-links', 'ignore_external_links',
    type=click.BOOL,
    default=None,
    help='Ignore external links (default: true)'
)
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='YAML/JSON file with default settings'
)
@click.option('--main-selector', 'main_selector', default=None, help='Content region selector (default: main)')
@click.option('--sidebar-selector', 'sidebar_selector', default=None, help='Navigation panel selector (default: aside)')
@click.option(
    '--nav-timeout', 'nav_timeout',
    type=float,
    default=None,
    help='Timeout of one navigation or query (seconds)'
)
@click.option(
    '--crawl-timeout', 'crawl_timeout',
    type=float,
    default=None,
    help='Timeout of the whole crawl (seconds)'
)
@click.option('--pretty', is_flag=True, help='Indent JSON output (2 spaces)')
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (stderr only if unset)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Logging format string'
)
def cli(url, executable, output_dir, headless, ignore_external_links, config_path,
        main_selector, sidebar_selector, nav_timeout, crawl_timeout, pretty,
        log_level, log_file, log_format):
    """Crawl a sidebar-navigated documentation site starting at URL."""
    init_logging(level=log_level, log_file=log_file, log_format=log_format)
    try:
        cfg = build_config(
            url,
            config_path,
            executable=executable,
            output_dir=output_dir,
            headless=headless,
            ignore_external_links=ignore_external_links,
            main_selector=main_selector,
            sidebar_selector=sidebar_selector,
            nav_timeout=nav_timeout,
        )
    except Exception as e:
        print_error(f'Invalid configuration: {e}')

    try:
        if crawl_timeout:
            result = asyncio.run(
                asyncio.wait_for(start_crawl(cfg), timeout=crawl_timeout)
            )
        else:
            result = asyncio.run(start_crawl(cfg))
    except asyncio.TimeoutError:
        print_error(f'Crawl did not finish within {crawl_timeout} seconds')
    except CrawlError as e:
        print_error(f'Crawl failed: {e}')

    if result.report is None:
        indent = 2 if pretty else None
        click.echo(json.dumps([p.as_dict() for p in result.pages], ensure_ascii=False, indent=indent))
        return

    click.echo(f'{cfg.output_dir}: {result.report.summary()}')


if __name__ == "__main__":
    cli()
