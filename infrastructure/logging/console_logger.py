# infrastructure/logging/console_logger.py
from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, TextIO

from application.ports.logger import LoggerPort

LEVELS = {"debug": 10, "info": 20, "warning": 30, "error": 40}


@dataclass(frozen=True)
class ConsoleLogger(LoggerPort):
    """One `event {json}` line per event, for machine consumption."""
    bound: Dict[str, Any] = field(default_factory=dict)
    stream: Optional[TextIO] = field(default=None, compare=False)
    level: str = "debug"

    def bind(self, **fields: Any) -> "ConsoleLogger":
        merged = dict(self.bound)
        merged.update(fields)
        return ConsoleLogger(bound=merged, stream=self.stream, level=self.level)

    def debug(self, event: str, **fields: Any) -> None:
        self._emit("debug", event, fields)

    def info(self, event: str, **fields: Any) -> None:
        self._emit("info", event, fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._emit("warning", event, fields)

    def error(self, event: str, **fields: Any) -> None:
        self._emit("error", event, fields)

    def _emit(self, level: str, event: str, fields: Dict[str, Any]) -> None:
        if LEVELS[level] < LEVELS.get(self.level.lower(), 0):
            return
        payload = dict(self.bound)
        payload.update(fields)
        payload.setdefault("type", event)
        payload.setdefault("level", level)
        print(f"{event} {json.dumps(payload, ensure_ascii=False, default=str)}", file=self.stream or sys.stdout)
