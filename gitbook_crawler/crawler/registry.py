# gitbook_crawler/crawler/registry.py
"""
Ordered, append-only collection of discovered pages keyed by link.
"""
from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from gitbook_crawler.crawler.models import PageEntry
from gitbook_crawler.logger import logger


class PageRegistry:
    """Keeps the first entry registered under each link key, in registration order."""

    def __init__(self) -> None:
        self._entries: Dict[str, PageEntry] = {}

    def register(self, entry: PageEntry) -> bool:
        """Add *entry* unless its key is already taken. Returns True if added."""
        if entry.link in self._entries:
            logger.debug("Duplicate link %s (%r) ignored", entry.link, entry.title)
            return False
        self._entries[entry.link] = entry
        return True

    def get(self, key: str) -> Optional[PageEntry]:
        return self._entries.get(key)

    def entries(self) -> List[PageEntry]:
        """Snapshot of the stored entries; the entries themselves are live."""
        return list(self._entries.values())

    def __iter__(self) -> Iterator[PageEntry]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


__all__ = ["PageRegistry"]
