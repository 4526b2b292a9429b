# gitbook_crawler/crawler/materializer.py
"""
Materializer: turns registered pages into ``<output_dir>/<link>.html`` files.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union

from gitbook_crawler.crawler.link_normalizer import fetch_url, is_external, output_path
from gitbook_crawler.crawler.models import ROOT_KEY, MaterializeReport, PageEntry
from gitbook_crawler.errors import FilesystemFailure, NotFoundRegion, UnsupportedExternalFetch
from gitbook_crawler.logger import logger


class Materializer:
    """Fetch and persist every registered page that has no output file yet.

    ``page`` is the crawl's shared browser page (anything with ``goto`` and
    ``query_region``); it is used sequentially, one entry at a time.
    """

    def __init__(
        self,
        page,
        output_dir: Union[str, Path],
        root_url: str,
        *,
        ignore_external_links: bool = True,
        main_selector: str = "main",
    ) -> None:
        self.page = page
        self.output_dir = Path(output_dir)
        self.root_url = root_url
        self.ignore_external_links = ignore_external_links
        self.main_selector = main_selector

    async def materialize(self, entries: Iterable[PageEntry]) -> MaterializeReport:
        report = MaterializeReport()
        for entry in entries:
            await self._materialize_one(entry, report)
        logger.info("Materialized into %s: %s", self.output_dir, report.summary())
        return report

    async def _materialize_one(self, entry: PageEntry, report: MaterializeReport) -> None:
        if entry.link == "/":
            entry.link = ROOT_KEY

        path = output_path(self.output_dir, entry.link)
        logger.info("Creating: %s", path)

        if path.exists():
            logger.debug("Skip %s: %s already exists", entry.link, path)
            report.existing.append(entry.link)
            return

        if entry.content is not None:
            self._write(path, entry.content)
            report.written.append(entry.link)
            return

        if is_external(entry.link):
            if not self.ignore_external_links:
                raise UnsupportedExternalFetch(entry.link)
            logger.debug("Skip external link %s", entry.link)
            report.skipped_external.append(entry.link)
            return

        url = fetch_url(self.root_url, entry.link)
        await self.page.goto(url)
        region = await self.page.query_region(self.main_selector)
        if region is None:
            raise NotFoundRegion("No main element found", selector=self.main_selector, url=url)
        entry.content = await region.inner_markup()

        self._write(path, entry.content)
        report.written.append(entry.link)

    @staticmethod
    def _write(path: Path, content: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise FilesystemFailure(path, exc) from exc


__all__ = ["Materializer"]
