# infrastructure/scenario/json_loader.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from domain.exceptions import ScenarioLoadError
from infrastructure.scenario.base_loader import ScenarioLoaderBase


class JsonScenarioLoader(ScenarioLoaderBase):
    def _load_file(self, path: Path) -> Any:
        # utf-8-sig tolerates a BOM written by some editors
        text = path.read_text(encoding="utf-8-sig")
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ScenarioLoadError(
                f"Invalid JSON in {path} at line {exc.lineno}, column {exc.colno}: {exc.msg}"
            ) from exc
