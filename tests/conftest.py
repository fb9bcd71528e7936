from __future__ import annotations

from typing import Any, List, Tuple

import pytest

from application.ports.logger import LoggerPort
from domain.config import RunnerConfig


class RecordingLogger(LoggerPort):
    """Collects (level, event, fields) tuples; bound loggers share the list."""

    def __init__(self, records: List[Tuple[str, str, dict]] = None, bound: dict = None):
        self.records = records if records is not None else []
        self.bound = bound or {}

    def bind(self, **fields: Any) -> "RecordingLogger":
        return RecordingLogger(self.records, {**self.bound, **fields})

    def debug(self, event: str, **fields: Any) -> None:
        self.records.append(("debug", event, {**self.bound, **fields}))

    def info(self, event: str, **fields: Any) -> None:
        self.records.append(("info", event, {**self.bound, **fields}))

    def warning(self, event: str, **fields: Any) -> None:
        self.records.append(("warning", event, {**self.bound, **fields}))

    def error(self, event: str, **fields: Any) -> None:
        self.records.append(("error", event, {**self.bound, **fields}))

    def events(self) -> List[str]:
        return [event for _, event, _ in self.records]


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def config(tmp_path) -> RunnerConfig:
    return RunnerConfig(
        timeout_ms=1000,
        screenshot_dir=str(tmp_path / "screenshots"),
        video_dir=str(tmp_path / "videos"),
        results_path=str(tmp_path / "results.json"),
    )
