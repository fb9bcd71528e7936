# application/executor/step_executor.py
from __future__ import annotations

import re
import time
from typing import Callable

from application.executor.handler_registry import HandlerRegistry
from application.services.execution_deps import ExecutionDeps
from domain.flow import Step
from domain.results import StepResult, StepStatus
from domain.run import FlowContext

_UNSAFE_FILENAME = re.compile(r"[\\/:*?\"<>|\s]+")


def _epoch_ms() -> int:
    return int(time.time() * 1000)


class StepExecutor:
    def __init__(self, registry: HandlerRegistry, clock: Callable[[], int] = _epoch_ms):
        self._registry = registry
        self._clock = clock

    def execute(self, step: Step, index: int, ctx: FlowContext, deps: ExecutionDeps) -> StepResult:
        """
        Run one step and return its finalized result. Never raises for a
        step failure; the failure is carried in the returned StepResult.
        """
        result = StepResult(
            index=index,
            action=step.action,
            params=dict(step.params),
            status=StepStatus.PENDING,
        )
        ctx.step_index = index

        deps.logger.info("step.start", index=index, action=step.action, target=step.describe())
        t0 = time.perf_counter()
        try:
            self._registry.dispatch(step, ctx, deps)
        except Exception as exc:
            result = result.failed(self._elapsed_ms(t0), str(exc))
            deps.logger.error(
                "step.failed",
                index=index,
                action=step.action,
                error=result.error,
                error_type=type(exc).__name__,
                elapsed_ms=result.duration,
            )
            self._capture_failure(index, ctx, deps)
            return result

        result = result.passed(self._elapsed_ms(t0))
        deps.logger.info("step.end", index=index, action=step.action, ok=True, elapsed_ms=result.duration)
        return result

    def _capture_failure(self, index: int, ctx: FlowContext, deps: ExecutionDeps) -> None:
        filename = f"error-{_UNSAFE_FILENAME.sub('-', ctx.scenario_name)}-step-{index}-{self._clock()}.png"
        path = deps.screenshot_path(filename)
        try:
            deps.session.screenshot(path, full_page=True)
        except Exception as exc:
            deps.logger.warning(
                "diagnostic.capture_failed",
                index=index,
                path=path,
                error=f"Could not take error screenshot: {exc}",
            )
            return
        ctx.screenshots.append(path)

    @staticmethod
    def _elapsed_ms(t0: float) -> int:
        return int((time.perf_counter() - t0) * 1000)
