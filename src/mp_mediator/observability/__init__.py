"""Observability – structured logging."""
from mp_mediator.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
