# gitbook_crawler/crawler/fetcher.py
"""
Fetcher module: one Playwright browser session with a single reusable page.

All navigation in a crawl goes through the same :class:`BrowserPage`, so
fetches are strictly sequential.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from playwright.async_api import Browser, ElementHandle, Page, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

from gitbook_crawler.crawler.link_normalizer import extract_anchors
from gitbook_crawler.crawler.models import AnchorLink
from gitbook_crawler.errors import BrowserFailure, CloseFailure, LaunchFailure, NavigationFailure
from gitbook_crawler.logger import logger


class RegionHandle:
    """A matched element of a loaded page (e.g. ``main`` or ``aside``)."""

    def __init__(self, element: ElementHandle) -> None:
        self._element = element

    async def inner_markup(self) -> str:
        try:
            return await self._element.inner_html()
        except PlaywrightError as exc:
            raise BrowserFailure(f"Cannot read region markup: {exc.message}") from exc

    async def all_links(self) -> List[AnchorLink]:
        """All anchors inside the region, in document order."""
        return extract_anchors(await self.inner_markup())


class BrowserPage:
    """The single browser tab every fetch of a crawl goes through."""

    def __init__(self, page: Page, timeout: Optional[float] = None) -> None:
        self._page = page
        if timeout is not None:
            # Playwright takes milliseconds
            self._page.set_default_timeout(timeout * 1000)

    async def goto(self, url: str) -> None:
        logger.debug("Navigating to %s", url)
        try:
            await self._page.goto(url)
        except PlaywrightError as exc:
            raise NavigationFailure(url, exc.message) from exc

    async def title(self) -> str:
        try:
            return await self._page.title()
        except PlaywrightError as exc:
            raise BrowserFailure(f"Cannot read page title: {exc.message}") from exc

    async def query_region(self, selector: str) -> Optional[RegionHandle]:
        try:
            element = await self._page.query_selector(selector)
        except PlaywrightError as exc:
            raise BrowserFailure(f"Cannot query {selector!r}: {exc.message}") from exc
        return RegionHandle(element) if element is not None else None


class BrowserSession:
    """Owns the Playwright driver and a Chromium browser for one crawl.

    Use as ``async with await BrowserSession.launch(...) as session`` so the
    browser is shut down on every exit path.
    """

    def __init__(self, playwright: Playwright, browser: Browser, timeout: Optional[float] = None) -> None:
        self._playwright = playwright
        self._browser = browser
        self._timeout = timeout
        self._closed = False

    @classmethod
    async def launch(
        cls,
        *,
        headless: bool = True,
        executable: Union[str, Path, None] = None,
        timeout: Optional[float] = None,
    ) -> BrowserSession:
        """Start Playwright and Chromium; raises LaunchFailure on any driver error."""
        try:
            playwright = await async_playwright().start()
        except PlaywrightError as exc:
            raise LaunchFailure(f"Cannot start Playwright: {exc.message}") from exc

        launch_kwargs: dict = {"headless": headless}
        if executable is not None:
            launch_kwargs["executable_path"] = str(executable)
        try:
            browser = await playwright.chromium.launch(**launch_kwargs)
        except PlaywrightError as exc:
            await playwright.stop()
            raise LaunchFailure(f"Cannot launch browser: {exc.message}") from exc

        logger.debug("Browser launched (headless=%s, executable=%s)", headless, executable)
        return cls(playwright, browser, timeout)

    async def open_page(self) -> BrowserPage:
        try:
            context = await self._browser.new_context()
            page = await context.new_page()
        except PlaywrightError as exc:
            raise BrowserFailure(f"Cannot open a browser page: {exc.message}") from exc
        return BrowserPage(page, self._timeout)

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        failure: Optional[PlaywrightError] = None
        try:
            await self._browser.close()
        except PlaywrightError as exc:
            failure = exc
        # the driver is stopped even when the browser refused to close
        try:
            await self._playwright.stop()
        except PlaywrightError as exc:
            failure = failure or exc
        if failure is not None:
            raise CloseFailure(f"Cannot close browser: {failure.message}") from failure
        logger.debug("Browser closed")

    async def __aenter__(self) -> BrowserSession:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        try:
            await self.close()
        except CloseFailure as close_exc:
            if exc is None:
                raise
            logger.warning("Browser shutdown failed after an earlier error: %s", close_exc)


__all__ = ["BrowserSession", "BrowserPage", "RegionHandle"]
