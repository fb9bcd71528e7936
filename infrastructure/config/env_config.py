from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values

from domain.config import RunnerConfig
from domain.exceptions import ConfigError

ENV_PREFIX = "FLOW_TEST_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def _parse_positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{name} must be a positive integer, got {value}")
    return value


class EnvConfigLoader:
    """
    Reads FLOW_TEST_* settings from a .env file and the process environment.
    Process environment wins over the .env file.
    """

    def __init__(self, env_file: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None):
        self._env_file = env_file if env_file is not None else Path.cwd() / ".env"
        self._environ = environ if environ is not None else os.environ

    def values(self) -> Dict[str, str]:
        merged: Dict[str, str] = {}
        if self._env_file.exists():
            merged.update({k: v for k, v in dotenv_values(self._env_file).items() if v is not None})
        merged.update(self._environ)
        return {k[len(ENV_PREFIX):]: v for k, v in merged.items() if k.startswith(ENV_PREFIX)}

    def load(self, base: Optional[RunnerConfig] = None) -> RunnerConfig:
        base = base or RunnerConfig()
        env = self.values()
        overrides = {}
        if "TIMEOUT_MS" in env:
            overrides["timeout_ms"] = _parse_positive_int(ENV_PREFIX + "TIMEOUT_MS", env["TIMEOUT_MS"])
        for key, attr in (
            ("SCREENSHOT_DIR", "screenshot_dir"),
            ("VIDEO_DIR", "video_dir"),
            ("RESULTS_PATH", "results_path"),
        ):
            if env.get(key):
                overrides[attr] = env[key]
        for key, attr in (
            ("HEADLESS", "headless"),
            ("RECORD_VIDEO", "record_video"),
            ("CONTINUE_ON_ERROR", "continue_on_error"),
        ):
            if key in env:
                overrides[attr] = _parse_bool(ENV_PREFIX + key, env[key])
        return base.with_overrides(**overrides)
