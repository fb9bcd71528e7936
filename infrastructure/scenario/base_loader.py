"""
Build flow domain objects from parsed JSON/YAML data.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Union

from domain.exceptions import ScenarioLoadError
from domain.flow import RequirementsDocument, Scenario, Step, Story, Verification

PathLike = Union[str, Path]


class ScenarioLoaderBase(ABC):
    """
    Loads either a requirements document (`userStories`, `verification`)
    or a single scenario (`name`, `steps`). Only the shape is checked;
    action names are resolved when the step runs.
    """

    @abstractmethod
    def _load_file(self, path: Path) -> Any: ...

    def load_document(self, path: PathLike) -> RequirementsDocument:
        return self.document_from_dict(self._read(path))

    def load_scenario(self, path: PathLike) -> Scenario:
        return self.scenario_from_dict(self._read(path))

    def _read(self, path: PathLike) -> Dict[str, Any]:
        p = Path(path)
        if not p.exists():
            raise ScenarioLoadError(f"Scenario file not found: {path}")
        try:
            data = self._load_file(p)
        except ScenarioLoadError:
            raise
        except Exception as exc:
            raise ScenarioLoadError(f"Failed to parse {path}: {exc}") from exc
        if data is None:
            raise ScenarioLoadError(f"Scenario file is empty: {path}")
        if not isinstance(data, dict):
            raise ScenarioLoadError(f"Scenario file is invalid: {path}")
        return data

    def document_from_dict(self, data: Dict[str, Any]) -> RequirementsDocument:
        stories_data = data.get("userStories") or []
        if not isinstance(stories_data, list):
            raise ScenarioLoadError("'userStories' must be a list")
        stories = tuple(self._load_story(s, i) for i, s in enumerate(stories_data, start=1))
        return RequirementsDocument(
            stories=stories,
            verification=self._load_verification(data.get("verification") or {}),
        )

    def scenario_from_dict(self, data: Dict[str, Any]) -> Scenario:
        if not isinstance(data, dict):
            raise ScenarioLoadError("Scenario must be an object")
        steps_data = data.get("steps") or []
        if not isinstance(steps_data, list):
            raise ScenarioLoadError(f"Scenario '{data.get('name', '')}': 'steps' must be a list")
        return Scenario(
            name=str(data.get("name", "")),
            steps=tuple(self._load_step(s, i) for i, s in enumerate(steps_data, start=1)),
        )

    def _load_story(self, data: Any, position: int) -> Story:
        if not isinstance(data, dict):
            raise ScenarioLoadError(f"User story #{position} must be an object")
        scenarios_data: List[Any] = data.get("testScenarios") or []
        if not isinstance(scenarios_data, list):
            raise ScenarioLoadError(f"User story '{data.get('id')}': 'testScenarios' must be a list")
        return Story(
            id=str(data.get("id", f"story-{position}")),
            scenarios=tuple(self.scenario_from_dict(s) for s in scenarios_data),
        )

    def _load_step(self, data: Any, position: int) -> Step:
        if not isinstance(data, dict):
            raise ScenarioLoadError(f"Step #{position} must be an object")
        if "action" not in data:
            raise ScenarioLoadError(f"Step #{position} has no 'action'")
        return Step.from_dict(data)

    def _load_verification(self, data: Dict[str, Any]) -> Verification:
        return Verification(
            dev_server_url=data.get("devServerUrl"),
            screenshot_dir=data.get("screenshotDir"),
        )
