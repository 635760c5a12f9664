"""Application CQRS – type-erasing handler adapters.

The registry hands back an object known only to satisfy a contract such as
``QueryHandler[GetOrder, Order]``.  An adapter binds that object to its exact
message type and exposes one category-wide ``handle`` method taking the base
message type, so the mediator can invoke any handler of a category the same
way.  Each adapter narrows the message with a single ``isinstance`` check
before forwarding.
"""
from __future__ import annotations

import abc
from typing import Any, Callable, ClassVar, Generic, TypeVar

from mp_mediator.application.cqrs.commands import Command
from mp_mediator.application.cqrs.events import Event
from mp_mediator.application.cqrs.queries import Query
from mp_mediator.application.cqrs.resolver import MessageCategory, Resolution
from mp_mediator.kernel.errors import HandlerMismatchError

M = TypeVar("M")


class HandlerAdapter(abc.ABC, Generic[M]):
    """Pairs one handler instance with the exact message type it accepts."""

    method_name: ClassVar[str]

    def __init__(self, message_type: type, handler: Any) -> None:
        target = getattr(handler, self.method_name, None)
        if not callable(target):
            raise HandlerMismatchError(
                f"{type(handler).__qualname__} does not implement "
                f"{self.method_name}() for {message_type.__qualname__}",
                detail={"handler": type(handler).__qualname__, "method": self.method_name},
            )
        self._message_type = message_type
        self._inner = handler
        self._target: Callable[[Any], Any] = target

    @property
    def handler(self) -> Any:
        return self._inner

    @property
    def message_type(self) -> type:
        return self._message_type

    def _narrow(self, message: M) -> Any:
        if not isinstance(message, self._message_type):
            raise HandlerMismatchError(
                f"Handler bound to {self._message_type.__qualname__} "
                f"received {type(message).__qualname__}",
                detail={
                    "expected": self._message_type.__qualname__,
                    "received": type(message).__qualname__,
                },
            )
        return message

    @abc.abstractmethod
    def handle(self, message: M) -> Any:
        """Narrow *message* and forward it to the wrapped handler."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._message_type.__qualname__}, {self._inner!r})"


class CommandAdapter(HandlerAdapter[Command]):
    method_name = "execute"

    def handle(self, command: Command) -> None:
        self._target(self._narrow(command))


class AsyncCommandAdapter(HandlerAdapter[Command]):
    method_name = "execute_async"

    async def handle(self, command: Command) -> None:
        await self._target(self._narrow(command))


class QueryAdapter(HandlerAdapter[Query[Any]]):
    method_name = "handle"

    def handle(self, query: Query[Any]) -> Any:
        return self._target(self._narrow(query))


class AsyncQueryAdapter(HandlerAdapter[Query[Any]]):
    method_name = "handle"

    async def handle(self, query: Query[Any]) -> Any:
        return await self._target(self._narrow(query))


class EventAdapter(HandlerAdapter[Event]):
    method_name = "handle"

    def handle(self, event: Event) -> None:
        self._target(self._narrow(event))


class AsyncEventAdapter(HandlerAdapter[Event]):
    method_name = "handle"

    async def handle(self, event: Event) -> None:
        await self._target(self._narrow(event))


_ADAPTERS: dict[tuple[MessageCategory, bool], type[HandlerAdapter[Any]]] = {
    (MessageCategory.COMMAND, False): CommandAdapter,
    (MessageCategory.COMMAND, True): AsyncCommandAdapter,
    (MessageCategory.QUERY, False): QueryAdapter,
    (MessageCategory.QUERY, True): AsyncQueryAdapter,
    (MessageCategory.EVENT, False): EventAdapter,
    (MessageCategory.EVENT, True): AsyncEventAdapter,
}


def adapt(resolution: Resolution, handler: Any) -> Any:
    """Wrap *handler* in the adapter shape matching *resolution*."""
    adapter_cls = _ADAPTERS[(resolution.category, resolution.is_async)]
    return adapter_cls(resolution.message_type, handler)


__all__ = [
    "AsyncCommandAdapter",
    "AsyncEventAdapter",
    "AsyncQueryAdapter",
    "CommandAdapter",
    "EventAdapter",
    "HandlerAdapter",
    "QueryAdapter",
    "adapt",
]
