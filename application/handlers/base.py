from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, FrozenSet

from domain.flow import ActionKind, Step

if TYPE_CHECKING:
    from domain.run import FlowContext
    from application.services.execution_deps import ExecutionDeps


class StepHandler(ABC):
    """
    Performs the browser operation for a fixed set of action kinds.
    Returns on success and raises on failure; holds no state between steps.
    """

    kinds: FrozenSet[ActionKind] = frozenset()

    @abstractmethod
    def handle(self, step: Step, ctx: "FlowContext", deps: "ExecutionDeps") -> None: ...
