"""Application-layer errors raised by the mediator itself."""

from __future__ import annotations

from typing import Any

from mp_mediator.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class InvalidArgumentError(ApplicationError):
    """A construction directive received an absent or unusable argument.

    Fatal to construction: no :class:`~mp_mediator.application.mediator.Mediator`
    is produced.
    """

    default_code = "invalid_argument"

    def __init__(
        self,
        message: str = "Invalid argument",
        *,
        argument: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.argument = argument


class HandlerNotFoundError(ApplicationError):
    """No handler is registered for a request's key."""

    default_code = "handler_not_found"

    def __init__(self, key: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"No handler registered for key {key!r}", **kwargs)
        self.key = key


class RequestTypeMismatchError(ApplicationError):
    """A request matched a key bound to a different request type (strict mode)."""

    default_code = "request_type_mismatch"

    def __init__(self, key: str, expected: type, actual: type, **kwargs: Any) -> None:
        super().__init__(
            f"Key {key!r} is bound to {expected.__qualname__}, got {actual.__qualname__}",
            **kwargs,
        )
        self.key = key
        self.expected = expected
        self.actual = actual


class DeadlineExceededError(ApplicationError):
    """The context deadline passed before the work completed."""

    default_code = "deadline_exceeded"

    def __init__(self, message: str = "Deadline exceeded", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = [
    "ApplicationError",
    "DeadlineExceededError",
    "HandlerNotFoundError",
    "InvalidArgumentError",
    "RequestTypeMismatchError",
]
