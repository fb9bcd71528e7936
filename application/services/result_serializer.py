from __future__ import annotations

from typing import Any, Dict

from domain.results import ScenarioError, ScenarioResult, StepResult, SuiteEntry, SuiteResult


def step_to_dict(step: StepResult) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "index": step.index,
        "action": step.action,
        "params": dict(step.params),
        "status": step.status.value,
        "duration": step.duration,
    }
    if step.error is not None:
        out["error"] = step.error
    return out


def error_to_dict(error: ScenarioError) -> Dict[str, Any]:
    return {"step": error.step, "action": error.action, "error": error.error}


def scenario_to_dict(result: ScenarioResult) -> Dict[str, Any]:
    return {
        "scenario": result.scenario,
        "passed": result.passed,
        "startTime": result.start_time,
        "endTime": result.end_time,
        "duration": result.duration,
        "steps": [step_to_dict(s) for s in result.steps],
        "errors": [error_to_dict(e) for e in result.errors],
        "screenshots": list(result.screenshots),
        "video": result.video,
    }


def suite_entry_to_dict(entry: SuiteEntry) -> Dict[str, Any]:
    return {"storyId": entry.story_id, **scenario_to_dict(entry.result)}


def suite_to_dict(suite: SuiteResult) -> Dict[str, Any]:
    return {
        "totalScenarios": suite.total_scenarios,
        "passed": suite.passed,
        "failed": suite.failed,
        "scenarios": [suite_entry_to_dict(e) for e in suite.scenarios],
    }
