"""Testing fakes – RecordingMediator."""
from __future__ import annotations

from typing import Any, Awaitable

from mp_mediator.application.cqrs.commands import Command
from mp_mediator.application.cqrs.events import Event
from mp_mediator.application.cqrs.mediator import Mediator
from mp_mediator.application.cqrs.queries import Query
from mp_mediator.application.cqrs.resolver import MessageCategory, category_of
from mp_mediator.kernel.errors import HandlerNotFoundError

_REQUESTS = (MessageCategory.COMMAND, MessageCategory.QUERY)
_EVENTS = (MessageCategory.EVENT,)


class RecordingMediator(Mediator):
    """Mediator double that records messages instead of dispatching them.

    Queries are answered from *results*, keyed by query type; an unknown
    query type raises :class:`HandlerNotFoundError` like the real mediator.
    A message sent to the wrong operation raises :class:`TypeError` and is
    not recorded.
    """

    def __init__(self, results: dict[type, Any] | None = None) -> None:
        self._results: dict[type, Any] = dict(results or {})
        self._messages: list[Any] = []

    def stub(self, query_type: type, result: Any) -> None:
        self._results[query_type] = result

    def execute(self, message: Any) -> Any:
        self._record(message, _REQUESTS)
        return self._answer(message)

    def raise_event(self, event: Event) -> None:
        self._record(event, _EVENTS)

    def execute_async(self, message: Any) -> Awaitable[Any]:
        self._record(message, _REQUESTS)
        result = self._answer(message)

        async def _done() -> Any:
            return result

        return _done()

    def raise_event_async(self, event: Event) -> Awaitable[None]:
        self._record(event, _EVENTS)

        async def _done() -> None:
            return None

        return _done()

    @property
    def messages(self) -> list[Any]:
        return list(self._messages)

    @property
    def commands(self) -> list[Command]:
        return [m for m in self._messages if isinstance(m, Command)]

    @property
    def queries(self) -> list[Query[Any]]:
        return [m for m in self._messages if isinstance(m, Query)]

    @property
    def events(self) -> list[Event]:
        return [m for m in self._messages if isinstance(m, Event)]

    def of_type(self, message_type: type) -> list[Any]:
        return [m for m in self._messages if isinstance(m, message_type)]

    def clear(self) -> None:
        self._messages.clear()

    def _record(self, message: Any, allowed: tuple[MessageCategory, ...]) -> None:
        category = category_of(message)
        if category not in allowed:
            expected = " or ".join(c.value for c in allowed)
            raise TypeError(
                f"{type(message).__qualname__} belongs to the "
                f"{category.value} category; expected {expected}"
            )
        self._messages.append(message)

    def _answer(self, message: Any) -> Any:
        if not isinstance(message, Query):
            return None
        if type(message) not in self._results:
            raise HandlerNotFoundError(type(message))
        return self._results[type(message)]


__all__ = ["RecordingMediator"]
