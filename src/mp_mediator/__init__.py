"""
mp_mediator – In-process request mediator with a composable behavior pipeline.

Import path convention::

    from mp_mediator.application.mediator import Mediator, with_handler
    from mp_mediator.application.pipeline import LoggingBehavior, PipelineBehavior
    from mp_mediator.kernel.context import Context
    from mp_mediator.kernel.messaging import Request
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
