"""Application CQRS – Event, EventHandler, AsyncEventHandler."""

from __future__ import annotations

import abc
from typing import Generic, TypeVar

E = TypeVar("E", bound="Event")


class Event:
    """Marker base for events (something that already happened).

    An event may have any number of handlers, including none.
    """


class EventHandler(abc.ABC, Generic[E]):
    """Synchronously handle a single event type."""

    @abc.abstractmethod
    def handle(self, event: E) -> None: ...


class AsyncEventHandler(abc.ABC, Generic[E]):
    """Asynchronously handle a single event type."""

    @abc.abstractmethod
    async def handle(self, event: E) -> None: ...


__all__ = ["AsyncEventHandler", "Event", "EventHandler"]
