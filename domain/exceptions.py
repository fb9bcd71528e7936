from __future__ import annotations


class FlowError(Exception):
    """Base class for flow runner errors."""


class ActionError(FlowError):
    """The dispatched browser operation failed or timed out."""


class StepParameterError(ActionError):
    """A step lacks a parameter its action needs."""


class AssertionFailure(FlowError):
    """An assert step's expected condition did not hold."""


class UnknownActionError(FlowError):
    """A step names an unrecognized action kind."""


class ScenarioLoadError(FlowError):
    pass


class ConfigError(FlowError):
    pass
