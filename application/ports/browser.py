# application/ports/browser.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ContextManager, List, Optional, Union

from domain.config import Viewport


class LocatorPort(ABC):
    """Elements matching one selector."""

    @abstractmethod
    def click(self) -> None: ...

    @abstractmethod
    def dblclick(self) -> None: ...

    @abstractmethod
    def fill(self, value: str) -> None: ...

    @abstractmethod
    def type(self, text: str, delay_ms: int) -> None: ...

    @abstractmethod
    def check(self) -> None: ...

    @abstractmethod
    def uncheck(self) -> None: ...

    @abstractmethod
    def focus(self) -> None: ...

    @abstractmethod
    def hover(self) -> None: ...

    @abstractmethod
    def select_option(self, value: Union[str, List[str]]) -> None: ...

    @abstractmethod
    def scroll_into_view(self) -> None: ...

    @abstractmethod
    def text_content(self) -> Optional[str]: ...

    @abstractmethod
    def get_attribute(self, name: str) -> Optional[str]: ...

    @abstractmethod
    def input_value(self) -> str: ...

    @abstractmethod
    def is_visible(self) -> bool: ...

    @abstractmethod
    def count(self) -> int: ...


class BrowserSessionPort(ABC):
    """
    One live page. Every wait takes an explicit timeout in milliseconds.
    Adapters raise domain.exceptions.ActionError when an operation fails.
    """

    @abstractmethod
    def navigate(self, url: str, wait_until: str, timeout_ms: int) -> None: ...

    @abstractmethod
    def wait_for_selector(self, selector: str, state: str, timeout_ms: int) -> None: ...

    @abstractmethod
    def locate(self, selector: str) -> LocatorPort: ...

    @abstractmethod
    def keyboard_press(self, key: str) -> None: ...

    @abstractmethod
    def screenshot(self, path: str, full_page: bool) -> None: ...

    @abstractmethod
    def evaluate(self, script: str, arg: Any = None) -> Any: ...

    @abstractmethod
    def set_input_files(self, selector: str, files: Union[str, List[str]]) -> None: ...

    @abstractmethod
    def drag_and_drop(self, source: str, target: str) -> None: ...

    @abstractmethod
    def reload(self, wait_until: str, timeout_ms: int) -> None: ...

    @abstractmethod
    def go_back(self, wait_until: str, timeout_ms: int) -> None: ...

    @abstractmethod
    def go_forward(self, wait_until: str, timeout_ms: int) -> None: ...

    @abstractmethod
    def wait_for_navigation(self, timeout_ms: int) -> None: ...

    @abstractmethod
    def wait_for_url(self, url: str, timeout_ms: int) -> None: ...

    @abstractmethod
    def wait_for_load_state(self, state: str, timeout_ms: int) -> None: ...

    @abstractmethod
    def wait(self, duration_ms: int) -> None: ...

    @abstractmethod
    def video_path(self) -> Optional[str]: ...


class BrowserPort(ABC):
    @abstractmethod
    def open_session(
        self,
        viewport: Viewport,
        video_dir: Optional[str] = None,
    ) -> ContextManager[BrowserSessionPort]:
        """
        Launch a browser and open one page. Leaving the context closes the
        page, the recording and the browser, whatever the exit path.
        """
        ...
