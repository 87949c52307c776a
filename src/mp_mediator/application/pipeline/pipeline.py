"""Application pipeline – Pipeline composer."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from mp_mediator.application.pipeline.behavior import DispatchStep, Next, PipelineBehavior
from mp_mediator.kernel.context import Context

if TYPE_CHECKING:
    from mp_mediator.kernel.messaging import Request


class _BehaviorStep:
    """One link of a composed chain: *behavior* wrapped around *inner*."""

    __slots__ = ("_behavior", "_inner")

    def __init__(self, behavior: PipelineBehavior, inner: DispatchStep) -> None:
        self._behavior = behavior
        self._inner = inner

    async def __call__(self, ctx: Context, request: "Request") -> Any:
        return await self._behavior.process(ctx, request, Next(self._inner, ctx, request))


class Pipeline:
    """Ordered behaviors that compose into a single dispatch chain."""

    def __init__(self, behaviors: Iterable[PipelineBehavior] = ()) -> None:
        self._behaviors: list[PipelineBehavior] = list(behaviors)

    def add(self, behavior: PipelineBehavior) -> "Pipeline":
        """Append a behavior (fluent API)."""
        self._behaviors.append(behavior)
        return self

    @property
    def behaviors(self) -> tuple[PipelineBehavior, ...]:
        return tuple(self._behaviors)

    def __len__(self) -> int:
        return len(self._behaviors)

    def compose(self, terminal: DispatchStep) -> DispatchStep:
        """Wrap the behaviors around *terminal* and return the chain.

        Behaviors are wrapped last-to-first so the first one added ends up
        outermost and therefore runs first. With no behaviors the chain is
        *terminal* itself. The returned chain does not see later ``add`` calls.
        """
        chain = terminal
        for behavior in reversed(self._behaviors):
            chain = _BehaviorStep(behavior, chain)
        return chain


__all__ = ["Pipeline"]
