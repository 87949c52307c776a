"""Kernel – dispatch context and deadlines."""
from mp_mediator.kernel.context.context import Context
from mp_mediator.kernel.context.deadline import Deadline

__all__ = ["Context", "Deadline"]
