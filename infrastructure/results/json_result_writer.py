# infrastructure/results/json_result_writer.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union


class JsonResultWriter:
    def write(self, payload: Dict[str, Any], path: Union[str, Path]) -> Path:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2, ensure_ascii=False)
            handle.write("\n")
        return target
