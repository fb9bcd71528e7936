from __future__ import annotations

from application.handlers.base import StepHandler
from application.services.execution_deps import ExecutionDeps
from domain.flow import ActionKind, Step
from domain.run import FlowContext

SCROLL_STEP_PX = 500
DEFAULT_WAIT_MS = 1000

BLUR_SCRIPT = "(sel) => document.querySelector(sel)?.blur()"
SCROLL_TO_SCRIPT = "({ x, y }) => window.scrollTo(x, y)"
SCROLL_BY_SCRIPT = "(d) => window.scrollBy(0, d)"


class PageStepHandler(StepHandler):
    """Page-level actions that do not wait for a selector first."""

    kinds = frozenset(
        {
            ActionKind.PRESS,
            ActionKind.SCREENSHOT,
            ActionKind.SCROLL,
            ActionKind.BLUR,
            ActionKind.DRAG,
            ActionKind.WAIT,
            ActionKind.EVALUATE,
        }
    )

    def handle(self, step: Step, ctx: FlowContext, deps: ExecutionDeps) -> None:
        kind = step.kind
        session = deps.session

        if kind == ActionKind.PRESS:
            session.keyboard_press(str(step.require("key")))
        elif kind == ActionKind.SCREENSHOT:
            self._screenshot(step, ctx, deps)
        elif kind == ActionKind.SCROLL:
            self._scroll(step, deps)
        elif kind == ActionKind.BLUR:
            session.evaluate(BLUR_SCRIPT, step.require("selector"))
        elif kind == ActionKind.DRAG:
            session.drag_and_drop(str(step.require("source")), str(step.require("target")))
        elif kind == ActionKind.WAIT:
            session.wait(int(step.get("duration") or DEFAULT_WAIT_MS))
        elif kind == ActionKind.EVALUATE:
            session.evaluate(str(step.require("script")))
        else:
            raise RuntimeError(f"{type(self).__name__} cannot handle {kind.value}")

    def _screenshot(self, step: Step, ctx: FlowContext, deps: ExecutionDeps) -> None:
        name = step.get("name") or f"step-{ctx.step_index}"
        path = deps.screenshot_path(f"{name}.png")
        deps.session.screenshot(path, full_page=bool(step.get("fullPage", False)))
        ctx.screenshots.append(path)

    def _scroll(self, step: Step, deps: ExecutionDeps) -> None:
        session = deps.session
        if step.has("selector"):
            session.locate(str(step.get("selector"))).scroll_into_view()
        elif step.has("position"):
            position = step.get("position")
            session.evaluate(SCROLL_TO_SCRIPT, {"x": position.get("x", 0), "y": position.get("y", 0)})
        else:
            delta = -SCROLL_STEP_PX if step.get("direction") == "up" else SCROLL_STEP_PX
            session.evaluate(SCROLL_BY_SCRIPT, delta)
