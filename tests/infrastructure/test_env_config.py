from __future__ import annotations

from pathlib import Path

import pytest

from domain.config import RunnerConfig
from domain.exceptions import ConfigError
from infrastructure.config.env_config import EnvConfigLoader


def test_defaults_without_environment(tmp_path: Path) -> None:
    config = EnvConfigLoader(env_file=tmp_path / ".env", environ={}).load()

    assert config == RunnerConfig()
    assert config.timeout_ms == 10000
    assert config.continue_on_error is False


def test_environment_overrides_base(tmp_path: Path) -> None:
    environ = {
        "FLOW_TEST_TIMEOUT_MS": "2500",
        "FLOW_TEST_HEADLESS": "false",
        "FLOW_TEST_CONTINUE_ON_ERROR": "yes",
        "FLOW_TEST_SCREENSHOT_DIR": "env-shots",
        "UNRELATED": "1",
    }
    base = RunnerConfig(screenshot_dir="doc-shots", video_dir="doc-videos")

    config = EnvConfigLoader(env_file=tmp_path / ".env", environ=environ).load(base)

    assert config.timeout_ms == 2500
    assert config.headless is False
    assert config.continue_on_error is True
    assert config.screenshot_dir == "env-shots"
    assert config.video_dir == "doc-videos"


def test_process_environment_wins_over_dotenv(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("FLOW_TEST_TIMEOUT_MS=3000\nFLOW_TEST_RECORD_VIDEO=0\n", encoding="utf-8")

    config = EnvConfigLoader(env_file=env_file, environ={"FLOW_TEST_TIMEOUT_MS": "4000"}).load()

    assert config.timeout_ms == 4000
    assert config.record_video is False


@pytest.mark.parametrize(
    "environ,message",
    [
        ({"FLOW_TEST_TIMEOUT_MS": "soon"}, "must be an integer"),
        ({"FLOW_TEST_TIMEOUT_MS": "-1"}, "must be a positive integer"),
        ({"FLOW_TEST_TIMEOUT_MS": "0"}, "must be a positive integer"),
        ({"FLOW_TEST_HEADLESS": "maybe"}, "must be a boolean"),
    ],
)
def test_invalid_values_raise_config_error(tmp_path: Path, environ, message) -> None:
    with pytest.raises(ConfigError, match=message):
        EnvConfigLoader(env_file=tmp_path / ".env", environ=environ).load()


def test_with_overrides_ignores_none() -> None:
    config = RunnerConfig().with_overrides(timeout_ms=None, headless=False)

    assert config.timeout_ms == 10000
    assert config.headless is False
