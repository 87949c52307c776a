"""Application pipeline – built-in behavior implementations."""
from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING, Any

import structlog

from mp_mediator.application.pipeline.behavior import Next, PipelineBehavior
from mp_mediator.kernel.context import Context
from mp_mediator.kernel.errors import DeadlineExceededError
from mp_mediator.observability.logging import get_logger

if TYPE_CHECKING:
    from mp_mediator.kernel.messaging import Request


class LoggingBehavior(PipelineBehavior):
    """Log request completion/failure with timing.

    ``request_key`` is bound into structlog contextvars while the rest of the
    chain runs, so handler logs carry it too.
    """

    def __init__(self, logger: Any = None) -> None:
        self._log = logger or get_logger(__name__)

    async def process(self, ctx: Context, request: "Request", next_: Next) -> Any:
        key = request.key()
        start = time.perf_counter()
        with structlog.contextvars.bound_contextvars(request_key=key):
            try:
                result = await next_(ctx)
            except Exception as exc:
                self._log.error(
                    "request.failed",
                    request_key=key,
                    error=type(exc).__name__,
                    duration_ms=round((time.perf_counter() - start) * 1000, 2),
                )
                raise
            self._log.info(
                "request.completed",
                request_key=key,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            return result


class ValidationBehavior(PipelineBehavior):
    """Call ``request.validate()`` if it exists before continuing."""

    async def process(self, ctx: Context, request: "Request", next_: Next) -> Any:
        validate = getattr(request, "validate", None)
        if callable(validate):
            validate()
        return await next_(ctx)


class TimeoutBehavior(PipelineBehavior):
    """Bound the rest of the chain by *timeout_seconds*.

    Later steps receive a derived context carrying the tighter deadline. If
    the incoming deadline has already passed, the chain is not entered. Only
    this behavior's own timeout becomes :class:`DeadlineExceededError`; a
    ``TimeoutError`` raised by the handler propagates unchanged.
    """

    def __init__(self, timeout_seconds: float) -> None:
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        self._timeout = timeout_seconds

    async def process(self, ctx: Context, request: "Request", next_: Next) -> Any:
        derived = ctx.with_timeout(self._timeout)
        derived.raise_if_expired()
        scope = asyncio.timeout(derived.remaining_seconds)
        try:
            async with scope:
                return await next_(derived)
        except TimeoutError as exc:
            if not scope.expired():
                raise
            raise DeadlineExceededError(
                f"{request.key()} exceeded its deadline",
                detail={"timeout_seconds": self._timeout},
            ) from exc


__all__ = ["LoggingBehavior", "TimeoutBehavior", "ValidationBehavior"]
