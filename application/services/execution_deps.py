from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Protocol

from application.ports.browser import BrowserSessionPort
from application.ports.logger import LoggerPort


class UrlResolverPort(Protocol):
    def resolve_url(self, url: str) -> str:
        ...


@dataclass(frozen=True)
class ExecutionDeps:
    session: BrowserSessionPort
    url_resolver: UrlResolverPort
    logger: LoggerPort
    timeout_ms: int
    screenshot_dir: str

    def resolve_url(self, url: str) -> str:
        return self.url_resolver.resolve_url(url)

    def step_timeout(self, value: Optional[Any]) -> int:
        """Step-supplied timeout if positive, else the scenario-wide default.

        Playwright treats 0 as "wait forever", so it never reaches the session.
        """
        if not value:
            return self.timeout_ms
        timeout = int(value)
        return timeout if timeout > 0 else self.timeout_ms

    def screenshot_path(self, filename: str) -> str:
        return str(Path(self.screenshot_dir) / filename)
