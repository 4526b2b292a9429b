# gitbook_crawler/crawler/models.py
"""
Data models for the sidebar crawler.
"""
from __future__ import annotations

import enum
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, Optional

__all__ = (
    "ROOT_KEY",
    "LinkKind",
    "NormalizedLink",
    "AnchorLink",
    "PageEntry",
    "MaterializeReport",
    "CrawlResult",
)

#: reserved registry key of the crawl root
ROOT_KEY = "index"


class LinkKind(enum.Enum):
    ROOT = "root"
    INTERNAL = "internal"
    EXTERNAL = "external"


@dataclass(frozen=True, slots=True)
class NormalizedLink:
    """Canonical form of a sidebar ``href``."""

    kind: LinkKind
    key: str
    fetch_url: Optional[str]

    @property
    def is_external(self) -> bool:
        return self.kind is LinkKind.EXTERNAL


@dataclass(frozen=True, slots=True)
class AnchorLink:
    """One ``<a>`` element read from the sidebar."""

    href: Optional[str]
    text: Optional[str]


@dataclass(slots=True)
class PageEntry:
    """A discovered document: link key, display title and (once fetched) markup.

    ``children`` is reserved for nested navigation and stays empty for now.
    """

    title: str
    link: str
    content: Optional[str] = None
    children: List[PageEntry] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PageEntry:
        return cls(
            title=data["title"],
            link=data["link"],
            content=data.get("content"),
            children=[cls.from_dict(child) for child in data.get("children", [])],
        )


@dataclass(slots=True)
class MaterializeReport:
    """What a Materializer pass did, by link key, in registry order."""

    written: List[str] = field(default_factory=list)
    existing: List[str] = field(default_factory=list)
    skipped_external: List[str] = field(default_factory=list)

    def summary(self) -> str:
        return (
            f"{len(self.written)} written, {len(self.existing)} already present, "
            f"{len(self.skipped_external)} external skipped"
        )


@dataclass(slots=True)
class CrawlResult:
    """Final registry contents plus the materialization report (None in discovery-only mode)."""

    pages: List[PageEntry]
    report: Optional[MaterializeReport] = None
