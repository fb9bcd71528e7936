# infrastructure/scenario/yaml_loader.py
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from domain.exceptions import ScenarioLoadError
from infrastructure.scenario.base_loader import ScenarioLoaderBase


class YamlScenarioLoader(ScenarioLoaderBase):
    def _load_file(self, path: Path) -> Any:
        with path.open("r", encoding="utf-8") as handle:
            try:
                return yaml.safe_load(handle)
            except yaml.YAMLError as exc:
                mark = getattr(exc, "problem_mark", None)
                where = f" at line {mark.line + 1}, column {mark.column + 1}" if mark else ""
                raise ScenarioLoadError(f"Invalid YAML in {path}{where}: {exc}") from exc
