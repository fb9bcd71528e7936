from __future__ import annotations

import pytest

from application.executor.handler_registry import HandlerRegistry
from application.handlers.assert_handler import AssertStepHandler
from application.handlers.element_handler import ElementStepHandler
from application.handlers.navigation_handler import NavigationStepHandler
from application.handlers.page_handler import PageStepHandler
from domain.exceptions import UnknownActionError
from domain.flow import ActionKind, Step


def test_default_registry_covers_every_action() -> None:
    registry = HandlerRegistry.default()

    for kind in ActionKind:
        assert kind in registry.get_handler(Step(kind.value)).kinds


def test_missing_handler_is_rejected() -> None:
    with pytest.raises(ValueError, match="No handler for actions: assert"):
        HandlerRegistry([NavigationStepHandler(), ElementStepHandler(), PageStepHandler()])


def test_duplicate_claim_is_rejected() -> None:
    handlers = [
        NavigationStepHandler(),
        ElementStepHandler(),
        PageStepHandler(),
        AssertStepHandler(),
        AssertStepHandler(),
    ]

    with pytest.raises(ValueError, match="claimed by both"):
        HandlerRegistry(handlers)


def test_unknown_action_is_rejected_at_dispatch() -> None:
    registry = HandlerRegistry.default()

    with pytest.raises(UnknownActionError, match="Unknown action: bogus"):
        registry.get_handler(Step("bogus"))
