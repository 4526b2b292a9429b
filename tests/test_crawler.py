# File: tests/test_crawler.py
from __future__ import annotations

from pathlib import Path

import pytest

from conftest import ROOT, FakePage, FakeSession, make_page
from gitbook_crawler.config import CrawlerConfig
from gitbook_crawler.crawler.crawler import SidebarCrawler
from gitbook_crawler.crawler.fetcher import BrowserSession
from gitbook_crawler.crawler.models import AnchorLink
from gitbook_crawler.engine import start_crawl
from gitbook_crawler.errors import NotFoundRegion, UnsupportedExternalFetch


async def run_crawler(config: CrawlerConfig, launcher):
    async with SidebarCrawler(config, launcher=launcher) as crawler:
        return await crawler.crawl()


@pytest.mark.asyncio()
async def test_end_to_end(fake_launcher, fake_page: FakePage, tmp_path: Path):
    config = CrawlerConfig(url=ROOT, output_dir=tmp_path)

    result = await run_crawler(config, fake_launcher)

    assert [p.link for p in result.pages] == ["index", "guide", "https://ext.example"]
    assert [p.title for p in result.pages] == ["Example Docs", "Guide", "Ext"]
    assert (tmp_path / "index.html").read_text(encoding="utf-8") == "<p>Welcome</p>"
    assert (tmp_path / "guide.html").read_text(encoding="utf-8") == "<h1>Guide</h1>"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["guide.html", "index.html"]
    assert result.report.written == ["index", "guide"]
    assert result.report.skipped_external == ["https://ext.example"]
    assert fake_page.visits == [f"{ROOT}/", f"{ROOT}/guide"]


@pytest.mark.asyncio()
async def test_discovery_only(fake_launcher, fake_page: FakePage):
    result = await run_crawler(CrawlerConfig(url=ROOT), fake_launcher)

    assert result.report is None
    assert len(result.pages) == 3
    assert result.pages[0].content == "<p>Welcome</p>"
    assert all(p.content is None for p in result.pages[1:])
    assert fake_page.visits == [f"{ROOT}/"]


@pytest.mark.asyncio()
async def test_missing_main_region_aborts_before_registering(tmp_path: Path):
    page = FakePage({ROOT: make_page("No main", None, [AnchorLink("guide", "Guide")])})
    session = FakeSession(page)

    async def launcher(**kwargs):
        return session

    crawler = SidebarCrawler(CrawlerConfig(url=ROOT, output_dir=tmp_path), launcher=launcher)
    with pytest.raises(NotFoundRegion, match="No main element found"):
        async with crawler:
            await crawler.crawl()

    assert len(crawler.registry) == 0
    assert session.closed
    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio()
async def test_missing_sidebar_aborts():
    page = FakePage({ROOT: make_page("No aside", "<p>hi</p>")})

    async def launcher(**kwargs):
        return FakeSession(page)

    with pytest.raises(NotFoundRegion, match="No side panel element found"):
        await run_crawler(CrawlerConfig(url=ROOT), launcher)


@pytest.mark.asyncio()
async def test_anchors_without_href_are_skipped_and_duplicates_collapse():
    sidebar = [
        AnchorLink(href=None, text="Section header"),
        AnchorLink(href="", text="Empty"),
        AnchorLink(href="guide", text="Guide"),
        AnchorLink(href="/guide", text="Guide (again)"),
        AnchorLink(href="/", text="Home"),
        AnchorLink(href="/api/auth", text=None),
    ]
    page = FakePage({ROOT: make_page("Docs", "<p>root</p>", sidebar)})

    async def launcher(**kwargs):
        return FakeSession(page)

    result = await run_crawler(CrawlerConfig(url=ROOT), launcher)

    assert [(p.link, p.title) for p in result.pages] == [
        ("index", "Docs"),
        ("guide", "Guide"),
        ("api/auth", ""),
    ]


@pytest.mark.asyncio()
async def test_external_link_not_ignored_aborts_and_closes_session(fake_launcher, fake_session, tmp_path: Path):
    config = CrawlerConfig(url=ROOT, output_dir=tmp_path, ignore_external_links=False)

    with pytest.raises(UnsupportedExternalFetch):
        await run_crawler(config, fake_launcher)

    assert fake_session.closed


@pytest.mark.asyncio()
async def test_launch_settings_are_passed_through(fake_launcher, fake_session, tmp_path: Path):
    config = CrawlerConfig(url=ROOT, headless=False, executable=tmp_path / "chrome", nav_timeout=3.0)

    await run_crawler(config, fake_launcher)

    assert fake_session.launch_kwargs == {
        "headless": False,
        "executable": tmp_path / "chrome",
        "timeout": 3.0,
    }
    assert fake_session.closed


@pytest.mark.asyncio()
async def test_rerun_is_idempotent(docs_site, tmp_path: Path):
    config = CrawlerConfig(url=ROOT, output_dir=tmp_path)
    first, second = FakePage(docs_site), FakePage(docs_site)

    async def launch_first(**kwargs):
        return FakeSession(first)

    async def launch_second(**kwargs):
        return FakeSession(second)

    await run_crawler(config, launch_first)
    result = await run_crawler(config, launch_second)

    # only the root is loaded again, for discovery
    assert second.visits == [f"{ROOT}/"]
    assert result.report.existing == ["index", "guide"]


@pytest.mark.asyncio()
async def test_start_crawl_uses_browser_session_launch(monkeypatch, fake_launcher, fake_session):
    monkeypatch.setattr(BrowserSession, "launch", fake_launcher)

    result = await start_crawl(CrawlerConfig(url=ROOT))

    assert [p.link for p in result.pages] == ["index", "guide", "https://ext.example"]
    assert fake_session.closed


@pytest.mark.asyncio()
async def test_crawl_requires_session():
    with pytest.raises(RuntimeError):
        await SidebarCrawler(CrawlerConfig(url=ROOT)).crawl()
