from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

SLOW_REQUEST_MS = 3000
FAILED_STATUS = 400

# (good below, needs-improvement below); anything else is poor
THRESHOLDS = {
    "ttfb": (200, 500),
    "lcp": (2500, 4000),
    "cls": (0.1, 0.25),
}


def grade(value: Optional[float], good: float, needs_improvement: float) -> str:
    if value is None:
        return "poor"
    if value < good:
        return "good"
    if value < needs_improvement:
        return "needs-improvement"
    return "poor"


def grade_metrics(timing: Dict[str, Any], web_vitals: Dict[str, Any]) -> Dict[str, str]:
    values = {"ttfb": timing.get("ttfb"), "lcp": web_vitals.get("lcp"), "cls": web_vitals.get("cls")}
    return {name: grade(values[name], *THRESHOLDS[name]) for name in THRESHOLDS}


@dataclass
class DevToolsLog:
    """Console, network and performance observations for one page load."""
    url: str
    captured_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    console: List[Dict[str, Any]] = field(default_factory=list)
    requests: List[Dict[str, Any]] = field(default_factory=list)
    failed: List[Dict[str, Any]] = field(default_factory=list)
    slow: List[Dict[str, Any]] = field(default_factory=list)
    timing: Dict[str, Any] = field(default_factory=dict)
    web_vitals: Dict[str, Any] = field(default_factory=dict)
    resources: List[Dict[str, Any]] = field(default_factory=list)
    errors: List[Dict[str, Any]] = field(default_factory=list)
    summary: Dict[str, Any] = field(
        default_factory=lambda: {
            "totalRequests": 0,
            "failedRequests": 0,
            "slowRequests": 0,
            "consoleErrors": 0,
            "consoleWarnings": 0,
            "jsErrors": 0,
        }
    )

    def record_console(self, kind: str, text: str, location: Optional[Dict[str, Any]], timestamp: int) -> None:
        self.console.append({"type": kind, "text": text, "location": location, "timestamp": timestamp})
        if kind == "error":
            self.summary["consoleErrors"] += 1
        elif kind == "warning":
            self.summary["consoleWarnings"] += 1

    def record_page_error(self, message: str, stack: Optional[str], timestamp: int) -> None:
        self.errors.append({"type": "javascript", "message": message, "stack": stack, "timestamp": timestamp})
        self.summary["jsErrors"] += 1

    def record_request(self) -> None:
        self.summary["totalRequests"] += 1

    def record_response(self, entry: Dict[str, Any]) -> None:
        self.requests.append(entry)
        status = entry.get("status") or 0
        if status >= FAILED_STATUS:
            self.failed.append({"url": entry["url"], "status": status, "statusText": entry.get("statusText")})
            self.summary["failedRequests"] += 1
        duration = entry.get("duration") or 0
        if duration > SLOW_REQUEST_MS:
            self.slow.append({"url": entry["url"], "duration": duration, "resourceType": entry.get("resourceType")})
            self.summary["slowRequests"] += 1

    def record_request_failed(self, url: str, error: Optional[str], resource_type: str) -> None:
        self.failed.append({"url": url, "error": error or "Unknown error", "resourceType": resource_type})
        self.summary["failedRequests"] += 1

    def record_navigation_error(self, message: str, timestamp: int) -> None:
        self.errors.append({"type": "navigation", "message": message, "timestamp": timestamp})

    def finalize(self) -> None:
        self.summary["loadTime"] = self.timing.get("load") or self.timing.get("navigationToLoad")
        self.summary["grades"] = grade_metrics(self.timing, self.web_vitals)

    @property
    def has_errors(self) -> bool:
        return self.summary["jsErrors"] > 0 or self.summary["failedRequests"] > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "capturedAt": self.captured_at,
            "console": self.console,
            "network": {"requests": self.requests, "failed": self.failed, "slow": self.slow},
            "performance": {"timing": self.timing, "webVitals": self.web_vitals, "resources": self.resources},
            "errors": self.errors,
            "summary": self.summary,
        }
