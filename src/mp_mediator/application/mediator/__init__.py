"""Application mediator – registry, construction options and the Mediator."""
from mp_mediator.application.mediator.handler import (
    HandlerFactory,
    HandlerFunc,
    HandlerFunction,
    RequestHandler,
    Sender,
)
from mp_mediator.application.mediator.mediator import Mediator
from mp_mediator.application.mediator.options import (
    Option,
    PipelineBuilder,
    PipelineContext,
    with_behavior,
    with_behavior_func,
    with_handler,
    with_handler_factory,
    with_handler_func,
)
from mp_mediator.application.mediator.registry import HandlerBinding, HandlerRegistry

__all__ = [
    "HandlerBinding",
    "HandlerFactory",
    "HandlerFunc",
    "HandlerFunction",
    "HandlerRegistry",
    "Mediator",
    "Option",
    "PipelineBuilder",
    "PipelineContext",
    "RequestHandler",
    "Sender",
    "with_behavior",
    "with_behavior_func",
    "with_handler",
    "with_handler_factory",
    "with_handler_func",
]
