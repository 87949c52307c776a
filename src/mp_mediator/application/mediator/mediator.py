"""Application mediator – Mediator, the single dispatch entry point."""
from __future__ import annotations

import inspect
from typing import Any

from mp_mediator.application.mediator.handler import Sender
from mp_mediator.application.mediator.options import Option, PipelineBuilder, PipelineContext
from mp_mediator.application.mediator.registry import HandlerRegistry
from mp_mediator.application.pipeline import PipelineBehavior
from mp_mediator.config import MediatorSettings
from mp_mediator.kernel.context import Context
from mp_mediator.kernel.errors import (
    HandlerNotFoundError,
    InvalidArgumentError,
    RequestTypeMismatchError,
)
from mp_mediator.kernel.messaging import Request
from mp_mediator.observability.logging import get_logger


class Mediator(Sender):
    """Send requests to their handlers through an ordered behavior pipeline.

    Registration happens only here, at construction time; afterwards the
    registry and the composed chain are read-only, so one instance can serve
    concurrent ``send`` calls for the life of the process.

    Usage::

        mediator = Mediator(
            with_behavior(LoggingBehavior()),
            with_handler(GetOrder, GetOrderHandler(repo)),
        )
        order = await mediator.send(Context.background(), GetOrder(order_id="o-1"))
    """

    def __init__(self, *options: Option, settings: MediatorSettings | None = None) -> None:
        self._settings = settings or MediatorSettings()
        self._log = get_logger(__name__)
        builder = PipelineBuilder(strict_types=self._settings.strict_request_types).apply(options)
        self._context: PipelineContext = builder.build(self._dispatch)
        self._log.debug(
            "mediator.built",
            handlers=len(self._context.registry),
            behaviors=len(self._context.behaviors),
            strict_request_types=self._settings.strict_request_types,
        )

    @property
    def settings(self) -> MediatorSettings:
        return self._settings

    @property
    def registry(self) -> HandlerRegistry:
        return self._context.registry

    @property
    def behaviors(self) -> tuple[PipelineBehavior, ...]:
        return self._context.behaviors

    async def send(self, ctx: Context | None, request: Request) -> Any:
        """Dispatch *request* and return its handler's (possibly transformed) result.

        ``ctx=None`` means :meth:`Context.background`. Errors raised by
        handlers, factories and behaviors propagate unchanged.
        """
        if request is None:
            raise InvalidArgumentError("Request is required", argument="request")
        if ctx is None:
            ctx = Context.background()
        if self._settings.log_dispatch:
            self._log.debug("mediator.dispatch", request_key=request.key())
        chain = self._context.chain
        if chain is None:
            return await self._dispatch(ctx, request)
        return await chain(ctx, request)

    async def _dispatch(self, ctx: Context, request: Request) -> Any:
        """Terminal step: look up the factory, build the handler, invoke it."""
        key = request.key()
        registry = self._context.registry
        if key not in registry:
            if self._settings.log_dispatch:
                self._log.debug("mediator.handler_not_found", request_key=key)
            raise HandlerNotFoundError(key)
        binding = registry.binding(key)
        if registry.strict_types and not isinstance(request, binding.request_type):
            raise RequestTypeMismatchError(key, binding.request_type, type(request))

        handler = binding.factory()
        if inspect.isawaitable(handler):
            handler = await handler
        if handler is None:
            raise HandlerNotFoundError(key, f"Handler factory for key {key!r} produced no handler")
        return await handler.handle(ctx, request)


__all__ = ["Mediator"]
