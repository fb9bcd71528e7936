from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

DEFAULT_BASE_URL = "http://localhost:3000"


@dataclass(frozen=True)
class Viewport:
    width: int = 1920
    height: int = 1080


@dataclass(frozen=True)
class RunnerConfig:
    timeout_ms: int = 10000
    screenshot_dir: str = ".claude/screenshots"
    video_dir: str = ".claude/videos"
    headless: bool = True
    record_video: bool = True
    continue_on_error: bool = False
    viewport: Viewport = Viewport()
    results_path: str = ".claude/logs/flow-test-results.json"

    def with_overrides(self, **overrides: Any) -> "RunnerConfig":
        # None means "not given" so CLI flags can be passed through as-is
        given = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **given)
