"""Kernel context – Deadline.

A point in wall-clock time (UTC) after which a dispatch should give up.
Deadlines order by expiry, so ``min(a, b)`` is the tighter of two.
"""
from __future__ import annotations

import dataclasses
from datetime import UTC, datetime, timedelta

from mp_mediator.kernel.errors import DeadlineExceededError


def _now() -> datetime:
    return datetime.now(UTC)


@dataclasses.dataclass(frozen=True, order=True)
class Deadline:
    expires_at: datetime

    @classmethod
    def after(cls, seconds: float) -> "Deadline":
        """Deadline *seconds* from now; a negative value is already expired."""
        return cls(expires_at=_now() + timedelta(seconds=seconds))

    @property
    def remaining_seconds(self) -> float:
        """Seconds left, clamped at zero."""
        left = (self.expires_at - _now()).total_seconds()
        return left if left > 0 else 0.0

    @property
    def is_expired(self) -> bool:
        return self.expires_at <= _now()

    def raise_if_expired(self) -> None:
        if not self.is_expired:
            return
        raise DeadlineExceededError(detail={"expires_at": self.expires_at.isoformat()})


__all__ = ["Deadline"]
