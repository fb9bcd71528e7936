"""
Flow definition domain model
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from domain.exceptions import StepParameterError, UnknownActionError


class ActionKind(str, Enum):
    NAVIGATE = "navigate"
    CLICK = "click"
    DOUBLE_CLICK = "doubleClick"
    TYPE = "type"
    FILL = "fill"
    CLEAR = "clear"
    PRESS = "press"
    WAIT_FOR = "waitFor"
    WAIT_FOR_NAVIGATION = "waitForNavigation"
    WAIT_FOR_URL = "waitForURL"
    WAIT_FOR_LOAD_STATE = "waitForLoadState"
    ASSERT = "assert"
    SCREENSHOT = "screenshot"
    SCROLL = "scroll"
    HOVER = "hover"
    SELECT = "select"
    CHECK = "check"
    UNCHECK = "uncheck"
    FOCUS = "focus"
    BLUR = "blur"
    UPLOAD = "upload"
    DRAG = "drag"
    WAIT = "wait"
    EVALUATE = "evaluate"
    RELOAD = "reload"
    GO_BACK = "goBack"
    GO_FORWARD = "goForward"

    @classmethod
    def parse(cls, name: Any) -> "ActionKind":
        try:
            return cls(name)
        except ValueError:
            raise UnknownActionError(f"Unknown action: {name}") from None


_MISSING = object()


@dataclass(frozen=True)
class Step:
    """
    One declarative instruction.

    `action` is kept as the raw string from the definition so that an
    unrecognized kind still loads and fails when it is dispatched.
    """
    action: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Step":
        params = {k: v for k, v in data.items() if k != "action"}
        return cls(action=data.get("action"), params=params)

    @property
    def kind(self) -> ActionKind:
        return ActionKind.parse(self.action)

    def get(self, name: str, default: Any = None) -> Any:
        return self.params.get(name, default)

    def has(self, name: str) -> bool:
        return self.params.get(name) is not None

    def require(self, name: str) -> Any:
        value = self.params.get(name, _MISSING)
        if value is _MISSING or value is None:
            raise StepParameterError(f"Action '{self.action}' requires parameter '{name}'")
        return value

    def describe(self) -> str:
        target = self.get("selector") or self.get("url") or self.get("key") or ""
        return f"{self.action} {target}".strip()

    def to_dict(self) -> dict:
        return {"action": self.action, **dict(self.params)}


@dataclass(frozen=True)
class Scenario:
    name: str
    steps: Tuple[Step, ...] = ()


@dataclass(frozen=True)
class Story:
    id: str
    scenarios: Tuple[Scenario, ...] = ()


@dataclass(frozen=True)
class Verification:
    dev_server_url: Optional[str] = None
    screenshot_dir: Optional[str] = None


@dataclass(frozen=True)
class RequirementsDocument:
    """
    Requirements document aggregate root
    """
    stories: Tuple[Story, ...] = ()
    verification: Verification = field(default_factory=Verification)
