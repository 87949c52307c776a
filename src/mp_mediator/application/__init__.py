"""Application – mediator and behavior pipeline (framework-agnostic)."""

from mp_mediator.application.mediator import (
    HandlerFunction,
    HandlerRegistry,
    Mediator,
    RequestHandler,
    Sender,
    with_behavior,
    with_behavior_func,
    with_handler,
    with_handler_factory,
    with_handler_func,
)
from mp_mediator.application.pipeline import (
    BehaviorFunction,
    Next,
    Pipeline,
    PipelineBehavior,
)

__all__ = [
    "BehaviorFunction",
    "HandlerFunction",
    "HandlerRegistry",
    "Mediator",
    "Next",
    "Pipeline",
    "PipelineBehavior",
    "RequestHandler",
    "Sender",
    "with_behavior",
    "with_behavior_func",
    "with_handler",
    "with_handler_factory",
    "with_handler_func",
]
