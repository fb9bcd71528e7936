from __future__ import annotations

from typing import Any

from application.handlers.base import StepHandler
from application.services.execution_deps import ExecutionDeps
from domain.exceptions import AssertionFailure, StepParameterError
from domain.flow import ActionKind, Step
from domain.run import FlowContext


def _fmt(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class AssertStepHandler(StepHandler):
    """
    Up to five independent checks on one selector, evaluated in a fixed
    order: contains, visible, count, value, attribute. The first check
    that does not hold fails the step.
    """

    kinds = frozenset({ActionKind.ASSERT})

    def handle(self, step: Step, ctx: FlowContext, deps: ExecutionDeps) -> None:
        selector = str(step.require("selector"))
        session = deps.session

        expected_text = step.get("contains")
        if expected_text:
            session.wait_for_selector(selector, state="visible", timeout_ms=deps.step_timeout(step.get("timeout")))
            text = session.locate(selector).text_content()
            if not text or str(expected_text) not in text:
                raise AssertionFailure(f'Expected text "{expected_text}" not found in "{_fmt(text)}"')

        if step.get("visible") is not None:
            expected_visible = step.get("visible")
            if not isinstance(expected_visible, bool):
                raise StepParameterError(
                    f"Action 'assert' parameter 'visible' must be true or false, got {expected_visible!r}"
                )
            visible = session.locate(selector).is_visible()
            if visible != expected_visible:
                raise AssertionFailure(
                    f"Expected element {selector} visibility: {_fmt(expected_visible)}, got: {_fmt(visible)}"
                )

        if step.get("count") is not None:
            expected_count = int(step.get("count"))
            count = session.locate(selector).count()
            if count != expected_count:
                raise AssertionFailure(
                    f"Expected {expected_count} elements matching {selector}, found {count}"
                )

        if step.get("value") is not None:
            expected_value = str(step.get("value"))
            value = session.locate(selector).input_value()
            if value != expected_value:
                raise AssertionFailure(f'Expected input value "{expected_value}", got "{_fmt(value)}"')

        attribute = step.get("attribute")
        if attribute:
            expected_attr = step.get("expectedValue")
            actual = session.locate(selector).get_attribute(str(attribute))
            if actual != expected_attr:
                raise AssertionFailure(
                    f'Expected attribute {attribute}="{_fmt(expected_attr)}", got "{_fmt(actual)}"'
                )
