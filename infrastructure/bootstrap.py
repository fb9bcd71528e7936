"""Wire the interpreter to its adapters."""
from __future__ import annotations

from typing import Optional

from application.executor.handler_registry import HandlerRegistry
from application.executor.scenario_runner import ScenarioRunner
from application.executor.step_executor import StepExecutor
from application.executor.suite_runner import SuiteRunner
from application.ports.browser import BrowserPort
from application.ports.logger import LoggerPort
from domain.config import RunnerConfig
from infrastructure.browser.playwright_browser import PlaywrightBrowser
from infrastructure.url.base_url_resolver import BaseUrlResolver


def build_scenario_runner(
    config: RunnerConfig,
    logger: LoggerPort,
    browser: Optional[BrowserPort] = None,
) -> ScenarioRunner:
    return ScenarioRunner(
        executor=StepExecutor(HandlerRegistry.default()),
        browser=browser or PlaywrightBrowser(headless=config.headless),
        config=config,
        logger=logger,
        url_resolver_factory=BaseUrlResolver,
    )


def build_suite_runner(
    config: RunnerConfig,
    logger: LoggerPort,
    browser: Optional[BrowserPort] = None,
) -> SuiteRunner:
    return SuiteRunner(build_scenario_runner(config, logger, browser), logger)
