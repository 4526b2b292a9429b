# File: gitbook_crawler/errors.py
"""gitbook_crawler.errors: the failure kinds that abort a crawl."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

__all__ = [
    "CrawlError",
    "LaunchFailure",
    "NavigationFailure",
    "NotFoundRegion",
    "UnsupportedExternalFetch",
    "FilesystemFailure",
    "CloseFailure",
    "BrowserFailure",
]


class CrawlError(Exception):
    """Base class for every error that terminates a crawl."""


class LaunchFailure(CrawlError):
    """The browser driver or the browser itself could not be started."""


class NavigationFailure(CrawlError):
    """Navigating the shared page to ``url`` failed."""

    def __init__(self, url: str, reason: object = None) -> None:
        self.url = url
        message = f"Failed to load {url}"
        if reason is not None:
            message = f"{message}: {reason}"
        super().__init__(message)


class NotFoundRegion(CrawlError):
    """A loaded page has no element matching ``selector``."""

    def __init__(self, message: str, *, selector: str, url: Optional[str] = None) -> None:
        self.selector = selector
        self.url = url
        if url:
            message = f"{message} (selector {selector!r} on {url})"
        else:
            message = f"{message} (selector {selector!r})"
        super().__init__(message)


class UnsupportedExternalFetch(CrawlError):
    """An external link was reached while external links are not ignored."""

    def __init__(self, link: str) -> None:
        self.link = link
        super().__init__(f"External links are not supported: {link}")


class FilesystemFailure(CrawlError):
    """Creating an output directory or writing an output file failed."""

    def __init__(self, path: Union[str, Path], reason: object = None) -> None:
        self.path = Path(path)
        message = f"Cannot write {self.path}"
        if reason is not None:
            message = f"{message}: {reason}"
        super().__init__(message)


class CloseFailure(CrawlError):
    """The browser session could not be shut down cleanly."""


class BrowserFailure(CrawlError):
    """A browser call other than navigation failed (closed target, query timeout, ...)."""
