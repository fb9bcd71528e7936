from __future__ import annotations

import json
from pathlib import Path

from infrastructure.results.json_result_writer import JsonResultWriter


def test_writer_creates_parent_directories(tmp_path: Path) -> None:
    target = tmp_path / "logs" / "nested" / "results.json"

    written = JsonResultWriter().write({"totalScenarios": 0, "note": "ログイン"}, target)

    assert written == target
    text = target.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert "ログイン" in text
    assert json.loads(text) == {"totalScenarios": 0, "note": "ログイン"}
