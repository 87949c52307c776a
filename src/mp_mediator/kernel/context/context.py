"""Kernel context – Context.

The value threaded through every dispatch step. It carries an optional
:class:`Deadline` and a read-only bag of values. Deriving a context never
mutates the original, so a behavior can hand a tighter deadline to the rest
of the chain while its own caller keeps the old one.

Cancellation itself is asyncio task cancellation; the mediator never cancels
on its own initiative.
"""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Any, Mapping

from mp_mediator.kernel.context.deadline import Deadline

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclasses.dataclass(frozen=True)
class Context:
    """Immutable, deadline-bearing dispatch context."""
    deadline: Deadline | None = None
    values: Mapping[str, Any] = dataclasses.field(default_factory=lambda: _EMPTY)

    @classmethod
    def background(cls) -> "Context":
        """Root context: no deadline, no values."""
        return cls()

    def with_deadline(self, deadline: Deadline) -> "Context":
        """Derive a context whose deadline is the earlier of the two."""
        if self.deadline is not None and self.deadline <= deadline:
            return self
        return dataclasses.replace(self, deadline=deadline)

    def with_timeout(self, seconds: float) -> "Context":
        return self.with_deadline(Deadline.after(seconds))

    def with_value(self, key: str, value: Any) -> "Context":
        return dataclasses.replace(self, values=MappingProxyType({**self.values, key: value}))

    def value(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    @property
    def remaining_seconds(self) -> float | None:
        if self.deadline is None:
            return None
        return self.deadline.remaining_seconds

    @property
    def is_expired(self) -> bool:
        return self.deadline is not None and self.deadline.is_expired

    def raise_if_expired(self) -> None:
        if self.deadline is not None:
            self.deadline.raise_if_expired()


__all__ = ["Context"]
