from __future__ import annotations

import json
from pathlib import Path

import pytest

from domain.exceptions import ScenarioLoadError
from infrastructure.scenario.json_loader import JsonScenarioLoader

REQUIREMENTS = {
    "userStories": [
        {
            "id": "US-1",
            "testScenarios": [
                {
                    "name": "Login flow",
                    "steps": [
                        {"action": "navigate", "url": "/login"},
                        {"action": "fill", "selector": "#email", "value": "test@example.com"},
                        {"action": "assert", "selector": "h1", "contains": "Welcome"},
                    ],
                }
            ],
        },
        {"id": "US-2"},
    ],
    "verification": {"devServerUrl": "http://localhost:5173", "screenshotDir": "shots"},
}


def test_json_loader_parses_requirements_document(tmp_path: Path) -> None:
    path = tmp_path / "requirements.json"
    path.write_text(json.dumps(REQUIREMENTS), encoding="utf-8")

    document = JsonScenarioLoader().load_document(path)

    assert [s.id for s in document.stories] == ["US-1", "US-2"]
    assert document.stories[1].scenarios == ()
    scenario = document.stories[0].scenarios[0]
    assert scenario.name == "Login flow"
    assert [s.action for s in scenario.steps] == ["navigate", "fill", "assert"]
    assert scenario.steps[1].get("value") == "test@example.com"
    assert document.verification.dev_server_url == "http://localhost:5173"
    assert document.verification.screenshot_dir == "shots"


def test_json_loader_accepts_bom_and_unknown_actions(tmp_path: Path) -> None:
    path = tmp_path / "scenario.json"
    path.write_text('\ufeff{"name": "odd", "steps": [{"action": "bogus"}]}', encoding="utf-8")

    scenario = JsonScenarioLoader().load_scenario(path)

    assert scenario.steps[0].action == "bogus"


def test_story_id_defaults_to_position(tmp_path: Path) -> None:
    document = JsonScenarioLoader().document_from_dict({"userStories": [{"testScenarios": []}]})

    assert document.stories[0].id == "story-1"


@pytest.mark.parametrize(
    "content,message",
    [
        ("{not json", "Invalid JSON .* line 1, column 2"),
        ("[1, 2]", "invalid"),
        ('{"userStories": "US-1"}', "must be a list"),
        ('{"userStories": [{"testScenarios": [{"name": "x", "steps": [{"url": "/"}]}]}]}', "has no 'action'"),
    ],
)
def test_json_loader_rejects_malformed_documents(tmp_path: Path, content: str, message: str) -> None:
    path = tmp_path / "requirements.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ScenarioLoadError, match=message):
        JsonScenarioLoader().load_document(path)


def test_missing_file_is_reported(tmp_path: Path) -> None:
    with pytest.raises(ScenarioLoadError, match="not found"):
        JsonScenarioLoader().load_document(tmp_path / "nope.json")
