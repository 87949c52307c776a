"""Application pipeline – behavior chain composed around dispatch."""
from mp_mediator.application.pipeline.behavior import (
    BehaviorFunc,
    BehaviorFunction,
    DispatchStep,
    Next,
    PipelineBehavior,
)
from mp_mediator.application.pipeline.behaviors import (
    LoggingBehavior,
    TimeoutBehavior,
    ValidationBehavior,
)
from mp_mediator.application.pipeline.pipeline import Pipeline

__all__ = [
    "BehaviorFunc",
    "BehaviorFunction",
    "DispatchStep",
    "LoggingBehavior",
    "Next",
    "Pipeline",
    "PipelineBehavior",
    "TimeoutBehavior",
    "ValidationBehavior",
]
