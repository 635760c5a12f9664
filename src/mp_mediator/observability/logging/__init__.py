"""Observability – structlog configuration and logger helpers."""
from mp_mediator.observability.logging.factory import JsonLoggerFactory
from mp_mediator.observability.logging.processors import MessageTypeProcessor, get_logger

__all__ = ["JsonLoggerFactory", "MessageTypeProcessor", "get_logger"]
