"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class MessageTypeProcessor:
    """structlog processor that renders ``message_type`` class objects as names.

    The mediator binds the runtime message class on its log events; JSON
    renderers would otherwise fall back to ``repr``.
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        message_type = event_dict.get("message_type")
        if isinstance(message_type, type):
            event_dict["message_type"] = f"{message_type.__module__}.{message_type.__qualname__}"
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["MessageTypeProcessor", "get_logger"]
