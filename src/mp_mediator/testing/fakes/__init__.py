"""Testing fakes – in-memory doubles for handlers and behaviors."""
from mp_mediator.testing.fakes.behavior import RecordingBehavior, ShortCircuitBehavior
from mp_mediator.testing.fakes.handler import StubHandler

__all__ = ["RecordingBehavior", "ShortCircuitBehavior", "StubHandler"]
