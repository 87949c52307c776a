"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError             (application.py)
        ├── InvalidArgumentError
        ├── HandlerNotFoundError
        ├── RequestTypeMismatchError
        └── DeadlineExceededError

Configuration errors live in :mod:`mp_mediator.config.validation.errors`.
"""

from mp_mediator.kernel.errors.application import (
    ApplicationError,
    DeadlineExceededError,
    HandlerNotFoundError,
    InvalidArgumentError,
    RequestTypeMismatchError,
)
from mp_mediator.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DeadlineExceededError",
    "HandlerNotFoundError",
    "InvalidArgumentError",
    "RequestTypeMismatchError",
]
