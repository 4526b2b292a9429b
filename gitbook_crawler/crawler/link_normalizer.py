# gitbook_crawler/crawler/link_normalizer.py
"""
Sidebar link extraction and normalization utilities.

Everything here is pure: no browser, no writes.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Union

from bs4 import BeautifulSoup
from bs4.element import Tag
from gitbook_crawler.crawler.models import ROOT_KEY, AnchorLink, LinkKind, NormalizedLink
from gitbook_crawler.errors import FilesystemFailure

_EXTERNAL_PREFIXES = ("http://", "https://")


def is_external(link: str) -> bool:
    """
    Return True if *link* is written as an absolute HTTP(S) URL.

    Hosts are not compared, so an absolute link back to the crawled site
    counts as external too.
    """
    return link.lower().startswith(_EXTERNAL_PREFIXES)


def fetch_url(crawl_root_url: str, key: str) -> str:
    """Join the crawl root and a relative key with exactly one slash."""
    return f"{crawl_root_url.rstrip('/')}/{key}"


def output_path(output_dir: Union[str, Path], key: str) -> Path:
    """
    File that holds the markup of *key*: ``<output_dir>/<key>.html``.

    Leading slashes of *key* are dropped; a key that still resolves outside
    *output_dir* (``..`` segments) raises FilesystemFailure.
    """
    root = Path(output_dir)
    path = root / f"{key.lstrip('/')}.html"
    if not path.resolve().is_relative_to(root.resolve()):
        raise FilesystemFailure(path, "outside the output directory")
    return path


def normalize(raw_href: str, crawl_root_url: str) -> NormalizedLink:
    """
    Classify a sidebar ``href`` and derive its registry key and fetch URL.

    ``"/"`` is the root alias (key ``index``); absolute HTTP(S) hrefs are
    external and keep the href as key; anything else is internal with all
    leading slashes removed.
    """
    if raw_href == "/":
        return NormalizedLink(LinkKind.ROOT, ROOT_KEY, crawl_root_url)
    if is_external(raw_href):
        return NormalizedLink(LinkKind.EXTERNAL, raw_href, None)
    key = raw_href.lstrip("/")
    return NormalizedLink(LinkKind.INTERNAL, key, fetch_url(crawl_root_url, key))


def extract_anchors(markup: str) -> List[AnchorLink]:
    """
    Extract every ``<a>`` element from a region's markup, in document order.

    Anchors without an ``href`` are reported with ``href=None`` so that the
    caller decides what to skip.
    """
    soup = BeautifulSoup(markup, "html.parser")
    anchors: List[AnchorLink] = []
    for tag in soup.find_all("a"):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        href = href_val if isinstance(href_val, str) else None
        anchors.append(AnchorLink(href=href, text=tag.get_text()))
    return anchors


__all__ = ["is_external", "fetch_url", "output_path", "normalize", "extract_anchors"]
