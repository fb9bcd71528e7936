# infrastructure/scenario/loader_registry.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, Union

from domain.exceptions import ScenarioLoadError
from domain.flow import RequirementsDocument, Scenario
from infrastructure.scenario.base_loader import ScenarioLoaderBase
from infrastructure.scenario.json_loader import JsonScenarioLoader
from infrastructure.scenario.yaml_loader import YamlScenarioLoader

PathLike = Union[str, Path]


class ScenarioLoaderRegistry:
    """Chooses a loader from the file extension."""

    def __init__(self) -> None:
        yaml_loader = YamlScenarioLoader()
        self._loaders: Dict[str, ScenarioLoaderBase] = {
            ".json": JsonScenarioLoader(),
            ".yaml": yaml_loader,
            ".yml": yaml_loader,
        }

    @property
    def extensions(self):
        return sorted(self._loaders)

    def get_loader(self, path: PathLike) -> ScenarioLoaderBase:
        ext = Path(path).suffix.lower()
        try:
            return self._loaders[ext]
        except KeyError:
            raise ScenarioLoadError(
                f"Unsupported scenario format: {ext or '(none)'} (expected one of {', '.join(self.extensions)})"
            ) from None

    def load_document(self, path: PathLike) -> RequirementsDocument:
        return self.get_loader(path).load_document(path)

    def load_scenario(self, path: PathLike) -> Scenario:
        return self.get_loader(path).load_scenario(path)
