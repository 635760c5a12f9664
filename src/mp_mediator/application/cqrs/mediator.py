"""Application CQRS – Mediator port and InProcessMediator.

Usage::

    registry = HandlerRegistry()
    registry.add(CreateOrderHandler())
    registry.add(GetOrderHandler())

    mediator = InProcessMediator(registry.resolve, registry.resolve_all)
    mediator.execute(CreateOrder(item="widget"))
    order = mediator.execute(GetOrder(order_id="o-1"))
    await mediator.raise_event_async(OrderCreated(order_id="o-1"))

Any container can stand in for :class:`HandlerRegistry`: the mediator only
needs a single-lookup callable (contract -> handler or ``None``, may raise)
and a multi-lookup callable (contract -> iterable of handlers).
"""
from __future__ import annotations

import abc
import asyncio
from typing import Any, Awaitable, Callable, Iterable, TypeVar, overload

from mp_mediator.application.cqrs.adapters import adapt
from mp_mediator.application.cqrs.commands import Command
from mp_mediator.application.cqrs.events import Event
from mp_mediator.application.cqrs.queries import Query
from mp_mediator.application.cqrs.resolver import MessageCategory, Resolution, resolve
from mp_mediator.config.settings.mediator import MediatorSettings
from mp_mediator.kernel.errors import HandlerNotFoundError, HandlerTimeoutError
from mp_mediator.observability.logging import get_logger

R = TypeVar("R")

ResolveOne = Callable[[Any], Any]
ResolveAll = Callable[[Any], Iterable[Any]]

_SINGLE = (MessageCategory.COMMAND, MessageCategory.QUERY)
_MULTIPLE = (MessageCategory.EVENT,)


class Mediator(abc.ABC):
    """Port: route commands, queries and events to their handlers."""

    @overload
    def execute(self, message: Query[R]) -> R: ...
    @overload
    def execute(self, message: Command) -> None: ...

    @abc.abstractmethod
    def execute(self, message: Any) -> Any:
        """Run the single sync handler for a command or query."""

    @abc.abstractmethod
    def raise_event(self, event: Event) -> None:
        """Run every sync handler for *event*, in registry order."""

    @overload
    def execute_async(self, message: Query[R]) -> Awaitable[R]: ...
    @overload
    def execute_async(self, message: Command) -> Awaitable[None]: ...

    @abc.abstractmethod
    def execute_async(self, message: Any) -> Awaitable[Any]:
        """Await the single async handler for a command or query."""

    @abc.abstractmethod
    def raise_event_async(self, event: Event) -> Awaitable[None]:
        """Await every async handler for *event*."""


class InProcessMediator(Mediator):
    """Mediator resolving handlers through injected lookup callables.

    The instance holds no per-dispatch state and can be shared freely.

    Handler lookup and adaptation happen when an ``*_async`` method is
    *called*, before any awaitable is returned, so a missing handler raises
    :class:`HandlerNotFoundError` synchronously.  Exceptions raised by handlers
    propagate unchanged.  When an event handler fails, later handlers are not
    invoked.

    No timeout is applied unless ``settings.handler_timeout_seconds`` is set; a
    handler that never completes blocks the caller.
    """

    def __init__(
        self,
        resolve_one: ResolveOne,
        resolve_all: ResolveAll,
        *,
        settings: MediatorSettings | None = None,
    ) -> None:
        self._resolve_one = resolve_one
        self._resolve_all = resolve_all
        self._settings = settings or MediatorSettings()
        self._log = get_logger(__name__)

    @property
    def settings(self) -> MediatorSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Commands / queries
    # ------------------------------------------------------------------

    def execute(self, message: Any) -> Any:
        resolution = self._resolve(message, _SINGLE, is_async=False)
        adapter = self._single(resolution)
        return adapter.handle(message)

    def execute_async(self, message: Any) -> Awaitable[Any]:
        resolution = self._resolve(message, _SINGLE, is_async=True)
        adapter = self._single(resolution)
        return self._invoke_async(resolution, adapter, message)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def raise_event(self, event: Event) -> None:
        resolution = self._resolve(event, _MULTIPLE, is_async=False)
        adapters = self._many(resolution)
        for index, adapter in enumerate(adapters):
            try:
                adapter.handle(event)
            except Exception as exc:
                self._delivery_aborted(resolution, index, len(adapters), exc)
                raise

    def raise_event_async(self, event: Event) -> Awaitable[None]:
        resolution = self._resolve(event, _MULTIPLE, is_async=True)
        adapters = self._many(resolution)
        if self._settings.concurrent_events:
            return self._fan_out(resolution, adapters, event)
        return self._deliver_in_order(resolution, adapters, event)

    async def _deliver_in_order(self, resolution: Resolution, adapters: list[Any], event: Event) -> None:
        for index, adapter in enumerate(adapters):
            try:
                await self._with_timeout(resolution, adapter.handle(event))
            except Exception as exc:
                self._delivery_aborted(resolution, index, len(adapters), exc)
                raise

    async def _fan_out(self, resolution: Resolution, adapters: list[Any], event: Event) -> None:
        if adapters:
            await asyncio.gather(*(self._with_timeout(resolution, a.handle(event)) for a in adapters))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _resolve(
        self,
        message: Any,
        allowed: tuple[MessageCategory, ...],
        *,
        is_async: bool,
    ) -> Resolution:
        resolution = resolve(message, is_async=is_async)
        if resolution.category not in allowed:
            expected = " or ".join(c.value for c in allowed)
            raise TypeError(
                f"{resolution.message_type.__qualname__} belongs to the "
                f"{resolution.category.value} category; expected {expected}"
            )
        return resolution

    def _single(self, resolution: Resolution) -> Any:
        try:
            handler = self._resolve_one(resolution.contract)
        except Exception as exc:
            raise self._not_found(resolution, exc) from exc
        if handler is None:
            raise self._not_found(resolution)
        self._dispatching(resolution, 1)
        return adapt(resolution, handler)

    def _not_found(
        self, resolution: Resolution, cause: Exception | None = None
    ) -> HandlerNotFoundError:
        err = HandlerNotFoundError(resolution.message_type, contract=resolution.contract, cause=cause)
        self._log.warning("mediator.handler_not_found", **err.log_fields())
        return err

    def _many(self, resolution: Resolution) -> list[Any]:
        adapters = [adapt(resolution, h) for h in self._resolve_all(resolution.contract)]
        self._dispatching(resolution, len(adapters))
        return adapters

    async def _invoke_async(self, resolution: Resolution, adapter: Any, message: Any) -> Any:
        return await self._with_timeout(resolution, adapter.handle(message))

    async def _with_timeout(self, resolution: Resolution, awaitable: Awaitable[Any]) -> Any:
        timeout = self._settings.handler_timeout_seconds
        if timeout is None:
            return await awaitable
        deadline = asyncio.timeout(timeout)
        try:
            async with deadline:
                return await awaitable
        except TimeoutError as exc:
            # A TimeoutError raised by the handler itself passes through.
            if not deadline.expired():
                raise
            raise HandlerTimeoutError(resolution.message_type, timeout, cause=exc) from exc

    def _dispatching(self, resolution: Resolution, handler_count: int) -> None:
        if self._settings.log_dispatch:
            self._log.debug(
                "mediator.dispatch",
                message_type=resolution.message_type,
                category=resolution.category.value,
                is_async=resolution.is_async,
                handler_count=handler_count,
            )

    def _delivery_aborted(
        self,
        resolution: Resolution,
        index: int,
        total: int,
        exc: Exception,
    ) -> None:
        self._log.warning(
            "mediator.event_delivery_aborted",
            message_type=resolution.message_type,
            delivered=index,
            remaining=total - index - 1,
            error=repr(exc),
        )


__all__ = ["InProcessMediator", "Mediator", "ResolveAll", "ResolveOne"]
