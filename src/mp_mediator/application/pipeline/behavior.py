"""Application pipeline – Behavior base, function adapter and continuation."""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, Awaitable, Callable

from mp_mediator.kernel.context import Context

if TYPE_CHECKING:
    from mp_mediator.kernel.messaging import Request

DispatchStep = Callable[[Context, "Request"], Awaitable[Any]]
BehaviorFunc = Callable[[Context, "Request", "Next"], Awaitable[Any]]


class Next:
    """Continuation handed to a behavior for one chain invocation.

    The request is fixed for the lifetime of the dispatch, so resuming only
    takes a context. ``await next_()`` resumes with the context the behavior
    itself received; ``await next_(derived)`` hands *derived* to every later
    step.
    """

    __slots__ = ("_step", "_ctx", "_request")

    def __init__(self, step: DispatchStep, ctx: Context, request: "Request") -> None:
        self._step = step
        self._ctx = ctx
        self._request = request

    async def __call__(self, ctx: Context | None = None) -> Any:
        return await self._step(self._ctx if ctx is None else ctx, self._request)


class PipelineBehavior(abc.ABC):
    """Cross-cutting logic wrapped around dispatch.

    A behavior may inspect the request, decline to call ``next_`` (short
    circuit), or call it and replace the result or the raised error.
    """

    @abc.abstractmethod
    async def process(self, ctx: Context, request: "Request", next_: Next) -> Any: ...


class BehaviorFunction(PipelineBehavior):
    """Adapt a bare ``async def fn(ctx, request, next_)`` into a behavior."""

    __slots__ = ("_fn",)

    def __init__(self, fn: BehaviorFunc) -> None:
        self._fn = fn

    async def process(self, ctx: Context, request: "Request", next_: Next) -> Any:
        return await self._fn(ctx, request, next_)

    def __repr__(self) -> str:
        return f"BehaviorFunction({getattr(self._fn, '__qualname__', self._fn)!r})"


__all__ = ["BehaviorFunc", "BehaviorFunction", "DispatchStep", "Next", "PipelineBehavior"]
