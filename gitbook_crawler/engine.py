# File: gitbook_crawler/engine.py
"""gitbook_crawler.engine: entry point that runs one crawl for a given config."""

from __future__ import annotations

from gitbook_crawler.config import CrawlerConfig
from gitbook_crawler.crawler.crawler import SidebarCrawler
from gitbook_crawler.crawler.models import CrawlResult


async def start_crawl(cfg: CrawlerConfig) -> CrawlResult:
    """
    Run the sidebar crawler inside its browser session and return the result.

    Parameters
    ----------
    cfg : CrawlerConfig
        Crawl settings.

    Returns
    -------
    CrawlResult
        Discovered pages and, when an output directory is set, the
        materialization report.
    """
    async with SidebarCrawler(cfg) as crawler:
        return await crawler.crawl()


__all__ = ["start_crawl"]
