from __future__ import annotations

from typing import Dict, List

from application.handlers.assert_handler import AssertStepHandler
from application.handlers.base import StepHandler
from application.handlers.element_handler import ElementStepHandler
from application.handlers.navigation_handler import NavigationStepHandler
from application.handlers.page_handler import PageStepHandler
from application.services.execution_deps import ExecutionDeps
from domain.flow import ActionKind, Step
from domain.run import FlowContext


class HandlerRegistry:
    """
    Maps every ActionKind to exactly one handler. Construction fails if a
    kind is left unhandled or is claimed by more than one handler.
    """

    def __init__(self, handlers: List[StepHandler]):
        table: Dict[ActionKind, StepHandler] = {}
        for handler in handlers:
            for kind in handler.kinds:
                if kind in table:
                    raise ValueError(
                        f"Action {kind.value} claimed by both "
                        f"{type(table[kind]).__name__} and {type(handler).__name__}"
                    )
                table[kind] = handler

        missing = [kind.value for kind in ActionKind if kind not in table]
        if missing:
            raise ValueError(f"No handler for actions: {', '.join(missing)}")
        self._table = table

    @classmethod
    def default(cls) -> "HandlerRegistry":
        return cls(
            [
                NavigationStepHandler(),
                ElementStepHandler(),
                PageStepHandler(),
                AssertStepHandler(),
            ]
        )

    def get_handler(self, step: Step) -> StepHandler:
        # raises UnknownActionError for anything outside ActionKind
        return self._table[step.kind]

    def dispatch(self, step: Step, ctx: FlowContext, deps: ExecutionDeps) -> None:
        self.get_handler(step).handle(step, ctx, deps)
