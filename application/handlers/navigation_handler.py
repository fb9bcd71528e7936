from __future__ import annotations

from application.handlers.base import StepHandler
from application.services.execution_deps import ExecutionDeps
from domain.flow import ActionKind, Step
from domain.run import FlowContext

NETWORK_IDLE = "networkidle"


class NavigationStepHandler(StepHandler):
    kinds = frozenset(
        {
            ActionKind.NAVIGATE,
            ActionKind.WAIT_FOR_NAVIGATION,
            ActionKind.WAIT_FOR_URL,
            ActionKind.WAIT_FOR_LOAD_STATE,
            ActionKind.RELOAD,
            ActionKind.GO_BACK,
            ActionKind.GO_FORWARD,
        }
    )

    def handle(self, step: Step, ctx: FlowContext, deps: ExecutionDeps) -> None:
        kind = step.kind
        session = deps.session
        timeout = deps.step_timeout(step.get("timeout"))

        if kind == ActionKind.NAVIGATE:
            url = deps.resolve_url(str(step.require("url")))
            session.navigate(url, wait_until=NETWORK_IDLE, timeout_ms=timeout)
        elif kind == ActionKind.WAIT_FOR_NAVIGATION:
            session.wait_for_navigation(timeout_ms=timeout)
        elif kind == ActionKind.WAIT_FOR_URL:
            session.wait_for_url(str(step.require("url")), timeout_ms=timeout)
        elif kind == ActionKind.WAIT_FOR_LOAD_STATE:
            session.wait_for_load_state(step.get("state") or NETWORK_IDLE, timeout_ms=timeout)
        elif kind == ActionKind.RELOAD:
            session.reload(wait_until=NETWORK_IDLE, timeout_ms=timeout)
        elif kind == ActionKind.GO_BACK:
            session.go_back(wait_until=NETWORK_IDLE, timeout_ms=timeout)
        elif kind == ActionKind.GO_FORWARD:
            session.go_forward(wait_until=NETWORK_IDLE, timeout_ms=timeout)
        else:
            raise RuntimeError(f"{type(self).__name__} cannot handle {kind.value}")
