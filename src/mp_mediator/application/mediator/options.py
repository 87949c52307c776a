"""Application mediator – construction directives.

Each ``with_*`` function returns an :data:`Option`. Options are applied in the
order given to :class:`~mp_mediator.application.mediator.Mediator`; the first
one that fails aborts construction with its error.

Usage::

    mediator = Mediator(
        with_behavior(LoggingBehavior()),
        with_behavior_func(audit),
        with_handler(PlaceOrder, PlaceOrderHandler()),
        with_handler_factory(CancelOrder, lambda: CancelOrderHandler(repo)),
    )
"""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Iterable

from mp_mediator.application.mediator.handler import (
    HandlerFactory,
    HandlerFunc,
    HandlerFunction,
    RequestHandler,
)
from mp_mediator.application.mediator.registry import HandlerRegistry
from mp_mediator.application.pipeline import (
    BehaviorFunc,
    BehaviorFunction,
    DispatchStep,
    Pipeline,
    PipelineBehavior,
)
from mp_mediator.kernel.errors import InvalidArgumentError
from mp_mediator.kernel.messaging import Request

Option = Callable[["PipelineBuilder"], None]


class PipelineBuilder:
    """Mutable construction-time state that options act upon."""

    def __init__(self, *, strict_types: bool = False) -> None:
        self.registry = HandlerRegistry(strict_types=strict_types)
        self.pipeline = Pipeline()

    def apply(self, options: Iterable[Option]) -> "PipelineBuilder":
        for option in options:
            if option is None or not callable(option):
                raise InvalidArgumentError(f"Not a mediator option: {option!r}", argument="option")
            option(self)
        return self

    def use(self, behavior: PipelineBehavior | None) -> None:
        if behavior is None:
            raise InvalidArgumentError("Behavior is required", argument="behavior")
        if not isinstance(behavior, PipelineBehavior):
            raise InvalidArgumentError(
                f"{type(behavior).__qualname__} is not a PipelineBehavior", argument="behavior"
            )
        self.pipeline.add(behavior)

    def build(self, terminal: DispatchStep) -> "PipelineContext":
        """Freeze the registry and compose the chain around *terminal*."""
        self.registry.freeze()
        chain = self.pipeline.compose(terminal) if len(self.pipeline) else None
        return PipelineContext(
            registry=self.registry,
            behaviors=self.pipeline.behaviors,
            chain=chain,
        )


@dataclasses.dataclass(frozen=True)
class PipelineContext:
    """The immutable state of one mediator.

    ``chain`` is ``None`` when no behaviors were registered, meaning requests
    go straight to the terminal step.
    """
    registry: HandlerRegistry
    behaviors: tuple[PipelineBehavior, ...]
    chain: DispatchStep | None


def _constant_factory(handler: RequestHandler) -> HandlerFactory:
    def factory() -> RequestHandler:
        return handler

    return factory


def _require_callable(value: Any, argument: str) -> None:
    if value is None or not callable(value):
        raise InvalidArgumentError(f"{argument} must be callable", argument=argument)


def with_handler(prototype: Request | type[Request], handler: RequestHandler) -> Option:
    """Bind *prototype*'s key to a factory that always returns *handler*."""

    def option(builder: PipelineBuilder) -> None:
        if handler is None:
            raise InvalidArgumentError("Handler is required", argument="handler")
        if not isinstance(handler, RequestHandler):
            raise InvalidArgumentError(
                f"{type(handler).__qualname__} is not a RequestHandler", argument="handler"
            )
        builder.registry.register(prototype, _constant_factory(handler))

    return option


def with_handler_factory(prototype: Request | type[Request], factory: HandlerFactory) -> Option:
    """Bind *prototype*'s key to *factory*, called once per dispatch."""

    def option(builder: PipelineBuilder) -> None:
        builder.registry.register(prototype, factory)

    return option


def with_handler_func(prototype: Request | type[Request], fn: HandlerFunc) -> Option:
    """Bind *prototype*'s key to a bare ``async def fn(ctx, request)``."""

    def option(builder: PipelineBuilder) -> None:
        _require_callable(fn, "handler")
        builder.registry.register(prototype, _constant_factory(HandlerFunction(fn)))

    return option


def with_behavior(behavior: PipelineBehavior) -> Option:
    """Append *behavior* to the pipeline."""

    def option(builder: PipelineBuilder) -> None:
        builder.use(behavior)

    return option


def with_behavior_func(fn: BehaviorFunc) -> Option:
    """Append a bare ``async def fn(ctx, request, next_)`` to the pipeline."""

    def option(builder: PipelineBuilder) -> None:
        _require_callable(fn, "behavior")
        builder.use(BehaviorFunction(fn))

    return option


__all__ = [
    "Option",
    "PipelineBuilder",
    "PipelineContext",
    "with_behavior",
    "with_behavior_func",
    "with_handler",
    "with_handler_factory",
    "with_handler_func",
]
