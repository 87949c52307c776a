"""Observability – structured logging helpers."""
from mp_mediator.observability.logging.factory import JsonLoggerFactory
from mp_mediator.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
