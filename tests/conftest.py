# File: tests/conftest.py
from __future__ import annotations

from typing import Dict, List, Optional
from unittest.mock import AsyncMock

import pytest

from gitbook_crawler.crawler.fetcher import BrowserSession
from gitbook_crawler.crawler.models import AnchorLink
from gitbook_crawler.errors import NavigationFailure

ROOT = "https://docs.example.com"


class FakeRegion:
    """In-memory stand-in for a matched element."""

    def __init__(self, markup: str = "", links: Optional[List[AnchorLink]] = None) -> None:
        self.markup = markup
        self.links = links or []

    async def inner_markup(self) -> str:
        return self.markup

    async def all_links(self) -> List[AnchorLink]:
        return list(self.links)


class FakePage:
    """
    Browser page serving a dict of ``url -> {"title": str, <selector>: FakeRegion}``.
    Trailing slashes are ignored on lookup; every requested URL is recorded verbatim.
    """

    def __init__(self, site: Dict[str, dict]) -> None:
        self.site = {url.rstrip("/"): page for url, page in site.items()}
        self.visits: List[str] = []
        self._current: dict = {}

    async def goto(self, url: str) -> None:
        self.visits.append(url)
        try:
            self._current = self.site[url.rstrip("/")]
        except KeyError:
            raise NavigationFailure(url, "404") from None

    async def title(self) -> str:
        return self._current.get("title", "")

    async def query_region(self, selector: str) -> Optional[FakeRegion]:
        return self._current.get(selector)


class FakeSession(BrowserSession):
    """BrowserSession whose driver handles are mocks and whose page is a FakePage."""

    def __init__(self, page: FakePage) -> None:
        super().__init__(playwright=AsyncMock(), browser=AsyncMock())
        self.page = page
        self.launch_kwargs: dict = {}

    async def open_page(self) -> FakePage:
        return self.page

    @property
    def closed(self) -> bool:
        return self._closed


def make_page(title: str, main: Optional[str], aside: Optional[List[AnchorLink]] = None) -> dict:
    page: dict = {"title": title}
    if main is not None:
        page["main"] = FakeRegion(main)
    if aside is not None:
        page["aside"] = FakeRegion(links=aside)
    return page


@pytest.fixture()
def docs_site() -> Dict[str, dict]:
    """Root with a three-link sidebar (root alias, internal page, external site)."""
    return {
        ROOT: make_page(
            "Example Docs",
            "<p>Welcome</p>",
            [
                AnchorLink(href="/", text="Home"),
                AnchorLink(href="guide", text="Guide"),
                AnchorLink(href="https://ext.example", text="Ext"),
            ],
        ),
        f"{ROOT}/guide": make_page("Guide", "<h1>Guide</h1>"),
    }


@pytest.fixture()
def fake_page(docs_site) -> FakePage:
    return FakePage(docs_site)


@pytest.fixture()
def fake_session(fake_page) -> FakeSession:
    return FakeSession(fake_page)


@pytest.fixture()
def fake_launcher(fake_session):
    """Launcher returning ``fake_session``; records the launch arguments on it."""

    async def launch(**kwargs) -> FakeSession:
        fake_session.launch_kwargs = kwargs
        return fake_session

    return launch
