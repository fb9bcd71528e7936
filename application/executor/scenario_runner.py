from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional

from application.executor.step_executor import StepExecutor, _epoch_ms
from application.ports.browser import BrowserPort, BrowserSessionPort
from application.ports.logger import LoggerPort
from application.services.execution_deps import ExecutionDeps, UrlResolverPort
from domain.config import RunnerConfig
from domain.flow import Scenario
from domain.results import ScenarioError, ScenarioResult, ScenarioState, StepResult, StepStatus
from domain.run import FlowContext


class ScenarioRunner:
    """
    Runs the steps of one scenario in order against a fresh browser session.

    NOT_STARTED -> RUNNING -> PASSED | FAILED. Under the default policy the
    first failed step ends the run; with continue_on_error the remaining
    steps still run but the scenario stays failed.
    """

    def __init__(
        self,
        executor: StepExecutor,
        browser: BrowserPort,
        config: RunnerConfig,
        logger: LoggerPort,
        url_resolver_factory: Callable[[str], UrlResolverPort],
        clock: Callable[[], int] = _epoch_ms,
    ):
        self._executor = executor
        self._url_resolver_factory = url_resolver_factory
        self._browser = browser
        self._config = config
        self._logger = logger
        self._clock = clock

    @property
    def config(self) -> RunnerConfig:
        return self._config

    def run(self, scenario: Scenario, base_url: str) -> ScenarioResult:
        logger = self._logger.bind(scenario=scenario.name)
        config = self._config
        Path(config.screenshot_dir).mkdir(parents=True, exist_ok=True)
        video_dir: Optional[str] = None
        if config.record_video:
            Path(config.video_dir).mkdir(parents=True, exist_ok=True)
            video_dir = config.video_dir

        state = ScenarioState.NOT_STARTED
        ctx = FlowContext(scenario_name=scenario.name, base_url=base_url)
        steps: List[StepResult] = []
        errors: List[ScenarioError] = []
        video: Optional[str] = None

        logger.info("scenario.start", steps=len(scenario.steps), base_url=base_url)
        start_time = self._clock()

        # session acquisition errors propagate; there is nothing to release yet
        with self._browser.open_session(config.viewport, video_dir) as session:
            state = self._transition(logger, state, ScenarioState.RUNNING)
            deps = ExecutionDeps(
                session=session,
                url_resolver=self._url_resolver_factory(base_url),
                logger=logger,
                timeout_ms=config.timeout_ms,
                screenshot_dir=config.screenshot_dir,
            )

            for index, step in enumerate(scenario.steps, start=1):
                result = self._executor.execute(step, index, ctx, deps)
                steps.append(result)
                if result.status == StepStatus.PASSED:
                    continue

                errors.append(ScenarioError(step=index, action=step.action, error=result.error or ""))
                if state != ScenarioState.FAILED:
                    state = self._transition(logger, state, ScenarioState.FAILED)
                if not config.continue_on_error:
                    break

            if state == ScenarioState.RUNNING:
                state = self._transition(logger, state, ScenarioState.PASSED)
            video = self._video_path(session, logger) if video_dir else None

        end_time = self._clock()
        result = ScenarioResult(
            scenario=scenario.name,
            start_time=start_time,
            end_time=end_time,
            steps=tuple(steps),
            errors=tuple(errors),
            screenshots=tuple(ctx.screenshots),
            video=video,
        )
        logger.info(
            "scenario.end",
            passed=result.passed,
            duration_ms=result.duration,
            steps_run=len(steps),
            failures=len(errors),
        )
        return result

    def _transition(self, logger: LoggerPort, current: ScenarioState, new: ScenarioState) -> ScenarioState:
        logger.debug("scenario.state", previous=current.value, state=new.value)
        return new

    def _video_path(self, session: BrowserSessionPort, logger: LoggerPort) -> Optional[str]:
        try:
            return session.video_path()
        except Exception as exc:
            logger.warning("session.video_unavailable", error=str(exc))
            return None
