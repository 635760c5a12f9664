"""Application CQRS – HandlerRegistry, a minimal in-memory handler container.

Usage::

    registry = HandlerRegistry()
    registry.add(CreateOrderHandler(repo))                    # contracts discovered
    registry.register(EventHandler[OrderCreated], audit)      # explicit contract
    registry.register_factory(QueryHandler[GetOrder, Order], lambda: GetOrderHandler(repo))

    mediator = registry.mediator()
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from mp_mediator.application.cqrs.resolver import contracts_of
from mp_mediator.kernel.errors import AmbiguousHandlerError

if TYPE_CHECKING:
    from mp_mediator.application.cqrs.mediator import InProcessMediator
    from mp_mediator.config.settings.mediator import MediatorSettings

Provider = Callable[[], Any]


class HandlerRegistry:
    """Maps handler contracts to an ordered list of handler providers.

    Instances registered with :meth:`register` / :meth:`add` are returned as-is
    on every lookup; factories registered with :meth:`register_factory` are
    called once per lookup.

    :meth:`resolve` is the single-handler lookup used for commands and
    queries: it returns ``None`` when nothing is registered and raises
    :class:`AmbiguousHandlerError` when more than one provider matches.
    :meth:`resolve_all` returns every handler in registration order.
    """

    def __init__(self) -> None:
        self._providers: dict[Any, list[Provider]] = {}

    def register(self, contract: Any, handler: Any) -> None:
        """Register a handler instance under *contract*."""
        self._providers.setdefault(contract, []).append(lambda: handler)

    def register_factory(self, contract: Any, factory: Provider) -> None:
        """Register a zero-argument factory producing a fresh handler per lookup."""
        self._providers.setdefault(contract, []).append(factory)

    def add(self, handler: Any) -> Any:
        """Register *handler* under every contract its class declares.

        Raises :class:`TypeError` if the class declares no concrete contract.
        Returns *handler* so the call can be chained.
        """
        contracts = contracts_of(type(handler))
        if not contracts:
            raise TypeError(f"{type(handler).__qualname__} does not declare any handler contract")
        for contract in contracts:
            self.register(contract, handler)
        return handler

    def resolve(self, contract: Any) -> Any:
        providers = self._providers.get(contract, [])
        if not providers:
            return None
        if len(providers) > 1:
            raise AmbiguousHandlerError(contract, len(providers))
        return providers[0]()

    def resolve_all(self, contract: Any) -> list[Any]:
        return [provider() for provider in self._providers.get(contract, [])]

    def contracts(self) -> list[Any]:
        """Every contract with at least one registration."""
        return list(self._providers)

    def clear(self) -> None:
        self._providers.clear()

    def mediator(self, settings: MediatorSettings | None = None) -> InProcessMediator:
        """Build an :class:`InProcessMediator` backed by this registry."""
        from mp_mediator.application.cqrs.mediator import InProcessMediator

        return InProcessMediator(self.resolve, self.resolve_all, settings=settings)

    def __contains__(self, contract: object) -> bool:
        return bool(self._providers.get(contract))

    def __len__(self) -> int:
        return sum(len(p) for p in self._providers.values())


__all__ = ["HandlerRegistry", "Provider"]
