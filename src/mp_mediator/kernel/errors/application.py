"""Application-layer errors — handler resolution and invocation problems."""

from __future__ import annotations

from typing import Any

from mp_mediator.kernel.errors.base import BaseError


def _type_name(tp: Any) -> str:
    module = getattr(tp, "__module__", None)
    qualname = getattr(tp, "__qualname__", None)
    if module and qualname:
        return f"{module}.{qualname}"
    return repr(tp)


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class HandlerNotFoundError(ApplicationError):
    """No handler could be obtained for a command or query.

    Raised both when the lookup returns nothing and when the lookup itself
    fails; in the latter case the lookup failure is attached as ``cause``.
    """

    default_code = "handler_not_found"

    def __init__(
        self,
        message_type: type,
        *,
        contract: Any = None,
        cause: BaseException | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Handler was not found for message of type {_type_name(message_type)}. "
            "The registry is not configured properly or no handler is registered "
            "for this message.",
            detail={"message_type": _type_name(message_type), "contract": repr(contract)},
            cause=cause,
            **kwargs,
        )
        self.message_type = message_type
        self.contract = contract


class AmbiguousHandlerError(ApplicationError):
    """A single-handler lookup found more than one handler."""

    default_code = "ambiguous_handler"

    def __init__(self, contract: Any, count: int, **kwargs: Any) -> None:
        super().__init__(
            f"Expected exactly one handler for {contract!r}, found {count}",
            detail={"contract": repr(contract), "count": count},
            **kwargs,
        )
        self.contract = contract
        self.count = count


class HandlerMismatchError(ApplicationError):
    """A resolved handler cannot accept the message it was resolved for."""

    default_code = "handler_mismatch"


class HandlerTimeoutError(ApplicationError):
    """An async handler exceeded the configured invocation timeout."""

    default_code = "handler_timeout"

    def __init__(
        self,
        message_type: type,
        timeout_seconds: float,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Handler for {_type_name(message_type)} timed out after {timeout_seconds}s",
            detail={"message_type": _type_name(message_type), "timeout_seconds": timeout_seconds},
            **kwargs,
        )
        self.message_type = message_type
        self.timeout_seconds = timeout_seconds


__all__ = [
    "AmbiguousHandlerError",
    "ApplicationError",
    "HandlerMismatchError",
    "HandlerNotFoundError",
    "HandlerTimeoutError",
]
