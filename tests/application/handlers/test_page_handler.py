from __future__ import annotations

import pytest

from application.handlers.page_handler import (
    BLUR_SCRIPT,
    SCROLL_BY_SCRIPT,
    SCROLL_TO_SCRIPT,
    PageStepHandler,
)
from domain.flow import Step
from tests.fake_browser import FakeElement, FakeSession, make_ctx, make_deps


@pytest.fixture
def session() -> FakeSession:
    return FakeSession({"#footer": FakeElement()})


def test_press_sends_key(session, logger) -> None:
    PageStepHandler().handle(Step("press", {"key": "Enter"}), make_ctx(), make_deps(session, logger))

    assert session.calls == [("keyboard_press", "Enter")]


def test_named_screenshot_is_recorded_on_context(session, logger) -> None:
    ctx = make_ctx()

    PageStepHandler().handle(
        Step("screenshot", {"name": "dashboard", "fullPage": True}), ctx, make_deps(session, logger)
    )

    assert session.calls == [("screenshot", "/shots/dashboard.png", True)]
    assert ctx.screenshots == ["/shots/dashboard.png"]


def test_unnamed_screenshot_uses_step_index(session, logger) -> None:
    ctx = make_ctx(step_index=4)

    PageStepHandler().handle(Step("screenshot"), ctx, make_deps(session, logger))

    assert ctx.screenshots == ["/shots/step-4.png"]
    assert session.calls[0][2] is False


def test_scroll_to_selector(session, logger) -> None:
    PageStepHandler().handle(Step("scroll", {"selector": "#footer"}), make_ctx(), make_deps(session, logger))

    assert session.calls == [("scroll_into_view", "#footer")]


def test_scroll_to_position(session, logger) -> None:
    step = Step("scroll", {"position": {"x": 0, "y": 800}})

    PageStepHandler().handle(step, make_ctx(), make_deps(session, logger))

    assert session.calls == [("evaluate", SCROLL_TO_SCRIPT, {"x": 0, "y": 800})]


@pytest.mark.parametrize("direction,delta", [("down", 500), ("up", -500), (None, 500)])
def test_scroll_by_direction(session, logger, direction, delta) -> None:
    PageStepHandler().handle(Step("scroll", {"direction": direction}), make_ctx(), make_deps(session, logger))

    assert session.calls == [("evaluate", SCROLL_BY_SCRIPT, delta)]


def test_blur_evaluates_with_selector(session, logger) -> None:
    PageStepHandler().handle(Step("blur", {"selector": "#email"}), make_ctx(), make_deps(session, logger))

    assert session.calls == [("evaluate", BLUR_SCRIPT, "#email")]


def test_drag_moves_source_onto_target(session, logger) -> None:
    step = Step("drag", {"source": "#card", "target": "#done"})

    PageStepHandler().handle(step, make_ctx(), make_deps(session, logger))

    assert session.calls == [("drag_and_drop", "#card", "#done")]


def test_wait_defaults_to_one_second(session, logger) -> None:
    handler = PageStepHandler()

    handler.handle(Step("wait"), make_ctx(), make_deps(session, logger))
    handler.handle(Step("wait", {"duration": 250}), make_ctx(), make_deps(session, logger))

    assert session.calls == [("wait", 1000), ("wait", 250)]


def test_evaluate_runs_script(session, logger) -> None:
    step = Step("evaluate", {"script": "() => localStorage.clear()"})

    PageStepHandler().handle(step, make_ctx(), make_deps(session, logger))

    assert session.calls == [("evaluate", "() => localStorage.clear()", None)]
