# === FILE: gitbook_crawler/config.py ===
"""
Loading and validation of crawler settings.
The schema is described and checked with Pydantic.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, HttpUrl


class CrawlerConfig(BaseModel):
    """Settings for a single crawl run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    url: HttpUrl = Field(..., description="Root URL of the documentation site.")
    executable: Optional[Path] = Field(None, description="Browser executable; Playwright's bundled one if unset.")
    output_dir: Optional[Path] = Field(None, description="Where .html files go; discovery-only if unset.")
    headless: bool = Field(True, description="Run the browser without a window.")
    ignore_external_links: bool = Field(True, description="Skip off-site links instead of aborting.")
    main_selector: str = Field("main", min_length=1, description="CSS selector of the content region.")
    sidebar_selector: str = Field("aside", min_length=1, description="CSS selector of the navigation panel.")
    nav_timeout: Optional[float] = Field(None, gt=0, description="Navigation/query timeout (seconds).")

    @property
    def root_url(self) -> str:
        """The crawl root as a plain string, without a trailing slash."""
        return str(self.url).rstrip("/")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def read_config_file(path: Union[str, Path]) -> dict[str, Any]:
    """Read a YAML or JSON settings file into a plain mapping (not yet validated)."""
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: Union[str, Path]) -> CrawlerConfig:
    """
    Read YAML or JSON and return a validated CrawlerConfig.
    The file must contain ``url``; raises FileNotFoundError if the file is missing.
    """
    return CrawlerConfig(**read_config_file(path))


def build_config(
    url: Optional[str] = None,
    config_path: Union[str, Path, None] = None,
    **overrides: Any,
) -> CrawlerConfig:
    """
    Merge an optional settings file with command-line values.

    Values that are ``None`` are treated as "not given" and leave the file
    (or model default) in place.
    """
    data: dict[str, Any] = read_config_file(config_path) if config_path is not None else {}
    if url is not None:
        data["url"] = url
    data.update({k: v for k, v in overrides.items() if v is not None})
    return CrawlerConfig(**data)


__all__ = ["CrawlerConfig", "load_config", "build_config", "read_config_file"]
