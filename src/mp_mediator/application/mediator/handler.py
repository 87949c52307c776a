"""Application mediator – RequestHandler, function adapter, Sender."""
from __future__ import annotations

import abc
from typing import Any, Awaitable, Callable, Union

from mp_mediator.kernel.context import Context
from mp_mediator.kernel.messaging import Request

HandlerFunc = Callable[[Context, Request], Awaitable[Any]]
HandlerFactory = Callable[[], Union["RequestHandler", Awaitable["RequestHandler"]]]


class RequestHandler(abc.ABC):
    """Fulfil every request sharing one key."""

    @abc.abstractmethod
    async def handle(self, ctx: Context, request: Request) -> Any: ...


class HandlerFunction(RequestHandler):
    """Adapt a bare ``async def fn(ctx, request)`` into a handler."""

    __slots__ = ("_fn",)

    def __init__(self, fn: HandlerFunc) -> None:
        self._fn = fn

    async def handle(self, ctx: Context, request: Request) -> Any:
        return await self._fn(ctx, request)

    def __repr__(self) -> str:
        return f"HandlerFunction({getattr(self._fn, '__qualname__', self._fn)!r})"


class Sender(abc.ABC):
    """Port: send a request and get its result."""

    @abc.abstractmethod
    async def send(self, ctx: Context | None, request: Request) -> Any: ...


__all__ = ["HandlerFactory", "HandlerFunc", "HandlerFunction", "RequestHandler", "Sender"]
