from __future__ import annotations

import functools
from contextlib import ExitStack, contextmanager
from typing import Any, Callable, Iterator, List, Optional, TypeVar, Union

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page, sync_playwright

from application.ports.browser import BrowserPort, BrowserSessionPort, LocatorPort
from domain.config import Viewport
from domain.exceptions import ActionError

F = TypeVar("F", bound=Callable[..., Any])


def _translate_errors(func: F) -> F:
    """Re-raise Playwright failures (including timeouts) as ActionError."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except PlaywrightError as exc:
            raise ActionError(exc.message or str(exc)) from exc

    return wrapper  # type: ignore[return-value]


class PlaywrightLocator(LocatorPort):
    # Single-element operations act on the first match, like page-level calls do.
    def __init__(self, locator: Locator):
        self._locator = locator

    @_translate_errors
    def click(self) -> None:
        self._locator.first.click()

    @_translate_errors
    def dblclick(self) -> None:
        self._locator.first.dblclick()

    @_translate_errors
    def fill(self, value: str) -> None:
        self._locator.first.fill(value)

    @_translate_errors
    def type(self, text: str, delay_ms: int) -> None:
        self._locator.first.press_sequentially(text, delay=delay_ms)

    @_translate_errors
    def check(self) -> None:
        self._locator.first.check()

    @_translate_errors
    def uncheck(self) -> None:
        self._locator.first.uncheck()

    @_translate_errors
    def focus(self) -> None:
        self._locator.first.focus()

    @_translate_errors
    def hover(self) -> None:
        self._locator.first.hover()

    @_translate_errors
    def select_option(self, value: Union[str, List[str]]) -> None:
        self._locator.first.select_option(value)

    @_translate_errors
    def scroll_into_view(self) -> None:
        self._locator.first.scroll_into_view_if_needed()

    @_translate_errors
    def text_content(self) -> Optional[str]:
        return self._locator.first.text_content()

    @_translate_errors
    def get_attribute(self, name: str) -> Optional[str]:
        return self._locator.first.get_attribute(name)

    @_translate_errors
    def input_value(self) -> str:
        return self._locator.first.input_value()

    @_translate_errors
    def is_visible(self) -> bool:
        return self._locator.first.is_visible()

    @_translate_errors
    def count(self) -> int:
        return self._locator.count()


class PlaywrightSession(BrowserSessionPort):
    def __init__(self, page: Page):
        self._page = page

    @_translate_errors
    def navigate(self, url: str, wait_until: str, timeout_ms: int) -> None:
        self._page.goto(url, wait_until=wait_until, timeout=timeout_ms)

    @_translate_errors
    def wait_for_selector(self, selector: str, state: str, timeout_ms: int) -> None:
        self._page.wait_for_selector(selector, state=state, timeout=timeout_ms)

    def locate(self, selector: str) -> LocatorPort:
        return PlaywrightLocator(self._page.locator(selector))

    @_translate_errors
    def keyboard_press(self, key: str) -> None:
        self._page.keyboard.press(key)

    @_translate_errors
    def screenshot(self, path: str, full_page: bool) -> None:
        self._page.screenshot(path=path, full_page=full_page)

    @_translate_errors
    def evaluate(self, script: str, arg: Any = None) -> Any:
        if arg is None:
            return self._page.evaluate(script)
        return self._page.evaluate(script, arg)

    @_translate_errors
    def set_input_files(self, selector: str, files: Union[str, List[str]]) -> None:
        self._page.set_input_files(selector, files)

    @_translate_errors
    def drag_and_drop(self, source: str, target: str) -> None:
        self._page.drag_and_drop(source, target)

    @_translate_errors
    def reload(self, wait_until: str, timeout_ms: int) -> None:
        self._page.reload(wait_until=wait_until, timeout=timeout_ms)

    @_translate_errors
    def go_back(self, wait_until: str, timeout_ms: int) -> None:
        self._page.go_back(wait_until=wait_until, timeout=timeout_ms)

    @_translate_errors
    def go_forward(self, wait_until: str, timeout_ms: int) -> None:
        self._page.go_forward(wait_until=wait_until, timeout=timeout_ms)

    @_translate_errors
    def wait_for_navigation(self, timeout_ms: int) -> None:
        # leaving the block waits for the next navigation to finish
        with self._page.expect_navigation(timeout=timeout_ms):
            pass

    @_translate_errors
    def wait_for_url(self, url: str, timeout_ms: int) -> None:
        self._page.wait_for_url(url, timeout=timeout_ms)

    @_translate_errors
    def wait_for_load_state(self, state: str, timeout_ms: int) -> None:
        self._page.wait_for_load_state(state, timeout=timeout_ms)

    @_translate_errors
    def wait(self, duration_ms: int) -> None:
        self._page.wait_for_timeout(duration_ms)

    @_translate_errors
    def video_path(self) -> Optional[str]:
        video = self._page.video
        if video is None:
            return None
        return video.path()


class PlaywrightBrowser(BrowserPort):
    def __init__(self, headless: bool = True, browser_type: str = "chromium"):
        self._headless = headless
        self._browser_type = browser_type

    @contextmanager
    def open_session(
        self,
        viewport: Viewport,
        video_dir: Optional[str] = None,
    ) -> Iterator[PlaywrightSession]:
        with ExitStack() as stack:
            try:
                pw = stack.enter_context(sync_playwright())
                browser = getattr(pw, self._browser_type).launch(headless=self._headless)
                stack.callback(browser.close)

                options: dict = {"viewport": {"width": viewport.width, "height": viewport.height}}
                if video_dir:
                    options["record_video_dir"] = video_dir
                context = browser.new_context(**options)
                stack.callback(context.close)
                page = context.new_page()
            except PlaywrightError as exc:
                raise ActionError(f"Could not start {self._browser_type}: {exc.message}") from exc

            yield PlaywrightSession(page)
