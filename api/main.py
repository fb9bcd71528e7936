"""FastAPI application - run flows over HTTP"""
from typing import Any, Callable, Dict, Optional

from fastapi import Body, FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from application.ports.browser import BrowserPort
from application.services.result_serializer import scenario_to_dict, suite_to_dict
from domain.config import DEFAULT_BASE_URL, RunnerConfig
from domain.exceptions import ConfigError, ScenarioLoadError
from infrastructure.bootstrap import build_scenario_runner, build_suite_runner
from infrastructure.config.env_config import EnvConfigLoader
from infrastructure.logging.loguru_logger import LoguruLogger
from infrastructure.scenario.json_loader import JsonScenarioLoader


class RunScenarioRequest(BaseModel):
    """Single scenario run request"""
    model_config = ConfigDict(populate_by_name=True)

    scenario: Dict[str, Any] = Field(description="Scenario definition: {name, steps}")
    base_url: str = Field(default=DEFAULT_BASE_URL, alias="baseUrl")
    continue_on_error: Optional[bool] = Field(default=None, alias="continueOnError")


class RunSuiteRequest(BaseModel):
    """Requirements document run request"""
    model_config = ConfigDict(populate_by_name=True)

    document: Dict[str, Any] = Field(description="Requirements document: {userStories, verification}")
    base_url: Optional[str] = Field(default=None, alias="baseUrl")
    continue_on_error: Optional[bool] = Field(default=None, alias="continueOnError")


app = FastAPI(
    title="Flow Test Runner",
    description="Declarative browser flow tests",
    version="1.0.0",
)

# Replaced in tests; None means a real Playwright browser.
BROWSER_FACTORY: Optional[Callable[[RunnerConfig], BrowserPort]] = None

_LOADER = JsonScenarioLoader()


def _build_config(continue_on_error: Optional[bool], base: Optional[RunnerConfig] = None) -> RunnerConfig:
    try:
        config = EnvConfigLoader().load(base)
    except ConfigError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return config.with_overrides(continue_on_error=continue_on_error)


def _browser(config: RunnerConfig) -> Optional[BrowserPort]:
    return BROWSER_FACTORY(config) if BROWSER_FACTORY else None


@app.get("/")
def read_root():
    """Health check"""
    return {"status": "ok", "service": "flow-test"}


@app.post("/flows/scenario")
def run_scenario(request: RunScenarioRequest = Body(...)) -> Dict[str, Any]:
    try:
        scenario = _LOADER.scenario_from_dict(request.scenario)
    except ScenarioLoadError as e:
        raise HTTPException(status_code=400, detail=str(e))

    config = _build_config(request.continue_on_error)
    logger = LoguruLogger().bind(surface="api")
    runner = build_scenario_runner(config, logger, _browser(config))
    return scenario_to_dict(runner.run(scenario, request.base_url))


@app.post("/flows/suite")
def run_suite(request: RunSuiteRequest = Body(...)) -> Dict[str, Any]:
    try:
        document = _LOADER.document_from_dict(request.document)
    except ScenarioLoadError as e:
        raise HTTPException(status_code=400, detail=str(e))

    base = RunnerConfig().with_overrides(screenshot_dir=document.verification.screenshot_dir)
    config = _build_config(request.continue_on_error, base)
    logger = LoguruLogger().bind(surface="api")
    runner = build_suite_runner(config, logger, _browser(config))
    return suite_to_dict(runner.run(document, request.base_url))
