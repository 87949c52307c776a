"""Testing support – fakes for exercising mediator pipelines."""

from mp_mediator.testing.fakes import RecordingBehavior, ShortCircuitBehavior, StubHandler

__all__ = ["RecordingBehavior", "ShortCircuitBehavior", "StubHandler"]
