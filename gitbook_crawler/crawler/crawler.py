# === FILE: gitbook_crawler/crawler/crawler.py ===
from __future__ import annotations

from typing import Awaitable, Callable, Optional

from gitbook_crawler.config import CrawlerConfig
from gitbook_crawler.crawler.fetcher import BrowserSession
from gitbook_crawler.crawler.link_normalizer import normalize
from gitbook_crawler.crawler.materializer import Materializer
from gitbook_crawler.crawler.models import ROOT_KEY, CrawlResult, PageEntry
from gitbook_crawler.crawler.registry import PageRegistry
from gitbook_crawler.errors import NotFoundRegion
from gitbook_crawler.logger import logger

__all__ = ("SidebarCrawler",)

Launcher = Callable[..., Awaitable[BrowserSession]]


class SidebarCrawler:
    """Crawler for sidebar-navigated documentation sites (GitBook and the like).

    Discovery is single-level: the root page is loaded once, every anchor of
    its sidebar is registered, and then each registered page is written to
    ``config.output_dir`` (if set).
    """

    def __init__(self, config: CrawlerConfig, launcher: Optional[Launcher] = None) -> None:
        self.config = config
        self._launcher: Launcher = launcher or BrowserSession.launch
        self.session: Optional[BrowserSession] = None
        self.registry = PageRegistry()

    async def __aenter__(self) -> SidebarCrawler:
        self.session = await self._launcher(
            headless=self.config.headless,
            executable=self.config.executable,
            timeout=self.config.nav_timeout,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session is not None:
            await self.session.__aexit__(exc_type, exc, tb)
            self.session = None

    async def crawl(self) -> CrawlResult:
        if self.session is None:
            raise RuntimeError("Session not initialized")
        logger.info("Crawl started: %s", self.config.url)
        page = await self.session.open_page()
        await self.discover(page)

        report = None
        if self.config.output_dir is not None:
            materializer = Materializer(
                page,
                self.config.output_dir,
                self.config.root_url,
                ignore_external_links=self.config.ignore_external_links,
                main_selector=self.config.main_selector,
            )
            report = await materializer.materialize(self.registry)
        else:
            logger.info("No output directory configured, discovery only")

        logger.info("Crawl finished: %d pages discovered", len(self.registry))
        return CrawlResult(pages=self.registry.entries(), report=report)

    async def discover(self, page) -> PageRegistry:
        """Load the root page and register it plus every sidebar link."""
        root = str(self.config.url)
        await page.goto(root)

        title = await page.title()
        logger.info("Title: %s", title)

        main = await page.query_region(self.config.main_selector)
        if main is None:
            raise NotFoundRegion("No main element found", selector=self.config.main_selector, url=root)
        content = await main.inner_markup()
        self.registry.register(PageEntry(title=title, link=ROOT_KEY, content=content))

        aside = await page.query_region(self.config.sidebar_selector)
        if aside is None:
            raise NotFoundRegion(
                "No side panel element found", selector=self.config.sidebar_selector, url=root
            )

        for anchor in await aside.all_links():
            # empty hrefs are skipped along with absent ones
            if anchor.href is None or not anchor.href.strip():
                continue
            text = anchor.text or ""
            logger.info("Link text: %s | URL: %s", text.strip(), anchor.href)
            link = normalize(anchor.href, self.config.root_url)
            self.registry.register(PageEntry(title=text, link=link.key))
        return self.registry
