from __future__ import annotations

from typing import Optional

from application.executor.scenario_runner import ScenarioRunner
from application.executor.step_executor import _epoch_ms
from application.ports.logger import LoggerPort
from domain.config import DEFAULT_BASE_URL
from domain.flow import RequirementsDocument, Scenario
from domain.results import ScenarioError, ScenarioResult, SuiteResult


class SuiteRunner:
    """
    Runs every scenario of every story, in document order, and folds the
    outcomes into one SuiteResult. A scenario that crashes is recorded as
    failed and the next scenario still runs.
    """

    def __init__(self, scenario_runner: ScenarioRunner, logger: LoggerPort):
        self._scenario_runner = scenario_runner
        self._logger = logger

    def run(self, document: RequirementsDocument, base_url: Optional[str] = None) -> SuiteResult:
        base_url = base_url or document.verification.dev_server_url or DEFAULT_BASE_URL
        suite = SuiteResult()

        for story in document.stories:
            if not story.scenarios:
                self._logger.debug("suite.story_skipped", story_id=story.id)
                continue
            for scenario in story.scenarios:
                result = self._run_isolated(story.id, scenario, base_url)
                suite.record(story.id, result)

        self._logger.info(
            "suite.end",
            total=suite.total_scenarios,
            passed=suite.passed,
            failed=suite.failed,
        )
        return suite

    def _run_isolated(self, story_id: str, scenario: Scenario, base_url: str) -> ScenarioResult:
        started = _epoch_ms()
        try:
            return self._scenario_runner.run(scenario, base_url)
        except Exception as exc:
            self._logger.error(
                "suite.scenario_crashed",
                story_id=story_id,
                scenario=scenario.name,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return ScenarioResult(
                scenario=scenario.name,
                start_time=started,
                end_time=_epoch_ms(),
                errors=(ScenarioError(step=None, action=None, error=str(exc)),),
            )
