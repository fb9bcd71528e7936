from __future__ import annotations

from application.handlers.base import StepHandler
from application.services.execution_deps import ExecutionDeps
from domain.flow import ActionKind, Step
from domain.run import FlowContext

DEFAULT_TYPE_DELAY_MS = 50


class ElementStepHandler(StepHandler):
    """
    Actions on the element matched by `selector`. The selector is awaited
    (visible, bounded by the step or default timeout) before acting.
    """

    kinds = frozenset(
        {
            ActionKind.CLICK,
            ActionKind.DOUBLE_CLICK,
            ActionKind.TYPE,
            ActionKind.FILL,
            ActionKind.CLEAR,
            ActionKind.HOVER,
            ActionKind.SELECT,
            ActionKind.CHECK,
            ActionKind.UNCHECK,
            ActionKind.FOCUS,
            ActionKind.UPLOAD,
            ActionKind.WAIT_FOR,
        }
    )

    def handle(self, step: Step, ctx: FlowContext, deps: ExecutionDeps) -> None:
        kind = step.kind
        selector = str(step.require("selector"))
        timeout = deps.step_timeout(step.get("timeout"))
        session = deps.session

        if kind == ActionKind.WAIT_FOR:
            session.wait_for_selector(selector, state=step.get("state") or "visible", timeout_ms=timeout)
            return

        session.wait_for_selector(selector, state="visible", timeout_ms=timeout)

        if kind == ActionKind.UPLOAD:
            session.set_input_files(selector, step.require("files"))
            return

        element = session.locate(selector)
        if kind == ActionKind.CLICK:
            element.click()
        elif kind == ActionKind.DOUBLE_CLICK:
            element.dblclick()
        elif kind == ActionKind.TYPE:
            delay = step.get("delay") or DEFAULT_TYPE_DELAY_MS
            element.type(str(step.require("text")), delay_ms=int(delay))
        elif kind == ActionKind.FILL:
            element.fill(str(step.require("value")))
        elif kind == ActionKind.CLEAR:
            element.fill("")
        elif kind == ActionKind.HOVER:
            element.hover()
        elif kind == ActionKind.SELECT:
            element.select_option(step.require("value"))
        elif kind == ActionKind.CHECK:
            element.check()
        elif kind == ActionKind.UNCHECK:
            element.uncheck()
        elif kind == ActionKind.FOCUS:
            element.focus()
        else:
            raise RuntimeError(f"{type(self).__name__} cannot handle {kind.value}")
