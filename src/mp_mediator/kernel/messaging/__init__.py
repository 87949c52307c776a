"""Kernel messaging – the Request contract."""
from mp_mediator.kernel.messaging.request import Request, request_key

__all__ = ["Request", "request_key"]
