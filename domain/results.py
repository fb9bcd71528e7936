from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class StepStatus(str, Enum):
    PENDING = "pending"
    PASSED = "passed"
    FAILED = "failed"


class ScenarioState(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"


@dataclass(frozen=True)
class StepResult:
    index: int
    action: str
    params: Dict[str, Any]
    status: StepStatus = StepStatus.PENDING
    duration: int = 0
    error: Optional[str] = None

    def passed(self, duration: int) -> "StepResult":
        return replace(self, status=StepStatus.PASSED, duration=duration, error=None)

    def failed(self, duration: int, error: str) -> "StepResult":
        return replace(self, status=StepStatus.FAILED, duration=duration, error=error)


@dataclass(frozen=True)
class ScenarioError:
    step: Optional[int]
    action: Optional[str]
    error: str


@dataclass(frozen=True)
class ScenarioResult:
    """
    Outcome of one scenario. `passed` holds iff no step failed and no
    error was recorded outside a step (e.g. the session could not start).
    """
    scenario: str
    start_time: int
    end_time: int
    steps: Tuple[StepResult, ...] = ()
    errors: Tuple[ScenarioError, ...] = ()
    screenshots: Tuple[str, ...] = ()
    video: Optional[str] = None

    @property
    def passed(self) -> bool:
        if self.errors:
            return False
        return all(s.status == StepStatus.PASSED for s in self.steps)

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time


@dataclass(frozen=True)
class SuiteEntry:
    story_id: str
    result: ScenarioResult


@dataclass
class SuiteResult:
    """
    Suite totals. Entries are only ever appended through `record`.
    """
    total_scenarios: int = 0
    passed: int = 0
    failed: int = 0
    scenarios: list = field(default_factory=list)

    def record(self, story_id: str, result: ScenarioResult) -> None:
        self.total_scenarios += 1
        if result.passed:
            self.passed += 1
        else:
            self.failed += 1
        self.scenarios.append(SuiteEntry(story_id=story_id, result=result))

    @property
    def ok(self) -> bool:
        return self.failed == 0
