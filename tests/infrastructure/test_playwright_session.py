from __future__ import annotations

import pytest
from playwright.sync_api import Error as PlaywrightError

from domain.exceptions import ActionError
from infrastructure.browser.playwright_browser import PlaywrightSession


class StubKeyboard:
    def __init__(self):
        self.pressed = []

    def press(self, key):
        self.pressed.append(key)


class StubPage:
    """Just enough of a Playwright page for the session adapter."""

    def __init__(self):
        self.keyboard = StubKeyboard()
        self.video = None
        self.calls = []

    def goto(self, url, wait_until, timeout):
        self.calls.append(("goto", url, wait_until, timeout))

    def wait_for_selector(self, selector, state, timeout):
        raise PlaywrightError(f"Timeout {timeout}ms exceeded.")

    def evaluate(self, script, *args):
        self.calls.append(("evaluate", script) + args)
        return 7


def test_calls_are_forwarded_with_playwright_keywords() -> None:
    page = StubPage()
    session = PlaywrightSession(page)

    session.navigate("http://localhost:3000/", wait_until="networkidle", timeout_ms=500)
    session.keyboard_press("Enter")

    assert page.calls == [("goto", "http://localhost:3000/", "networkidle", 500)]
    assert page.keyboard.pressed == ["Enter"]


def test_playwright_errors_become_action_errors() -> None:
    session = PlaywrightSession(StubPage())

    with pytest.raises(ActionError, match="Timeout 300ms exceeded"):
        session.wait_for_selector("#missing", state="visible", timeout_ms=300)


def test_evaluate_passes_argument_only_when_given() -> None:
    page = StubPage()
    session = PlaywrightSession(page)

    assert session.evaluate("() => 7") == 7
    session.evaluate("(d) => window.scrollBy(0, d)", 500)

    assert page.calls == [("evaluate", "() => 7"), ("evaluate", "(d) => window.scrollBy(0, d)", 500)]


def test_video_path_is_none_without_recording() -> None:
    assert PlaywrightSession(StubPage()).video_path() is None
