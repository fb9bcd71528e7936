# infrastructure/url/base_url_resolver.py
from __future__ import annotations

from dataclasses import dataclass

ABSOLUTE_PREFIXES = ("http://", "https://", "file://", "about:", "data:")


@dataclass(frozen=True)
class BaseUrlResolver:
    """Joins relative navigation targets onto the application's base URL."""
    base_url: str

    def resolve_url(self, url: str) -> str:
        if url.lower().startswith(ABSOLUTE_PREFIXES):
            return url
        if not self.base_url:
            return url
        if not url:
            return self.base_url
        return self.base_url.rstrip("/") + "/" + url.lstrip("/")
