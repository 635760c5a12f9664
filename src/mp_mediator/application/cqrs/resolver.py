"""Application CQRS – handler contract resolution.

Maps a message instance to the handler contract that must be looked up in the
registry.  The contract is the parametrised handler alias built from the
message's *runtime* type, e.g. ``CommandHandler[CreateOrder]`` or
``AsyncQueryHandler[GetOrder, OrderView]``.  Aliases are hashable and compare
equal when their origin and arguments match, so they serve directly as
registry keys.
"""
from __future__ import annotations

import dataclasses
import enum
import typing
from typing import Any, TypeVar

from mp_mediator.application.cqrs.commands import AsyncCommandHandler, Command, CommandHandler
from mp_mediator.application.cqrs.events import AsyncEventHandler, Event, EventHandler
from mp_mediator.application.cqrs.queries import (
    AsyncQueryHandler,
    Query,
    QueryHandler,
    query_result_type,
)


class MessageCategory(enum.Enum):
    COMMAND = "command"
    QUERY = "query"
    EVENT = "event"


class Multiplicity(enum.Enum):
    SINGLE = "single"
    MULTIPLE = "multiple"


_CATEGORY_BASES: tuple[tuple[type, MessageCategory], ...] = (
    (Command, MessageCategory.COMMAND),
    (Query, MessageCategory.QUERY),
    (Event, MessageCategory.EVENT),
)

_CONTRACTS: dict[tuple[MessageCategory, bool], type] = {
    (MessageCategory.COMMAND, False): CommandHandler,
    (MessageCategory.COMMAND, True): AsyncCommandHandler,
    (MessageCategory.QUERY, False): QueryHandler,
    (MessageCategory.QUERY, True): AsyncQueryHandler,
    (MessageCategory.EVENT, False): EventHandler,
    (MessageCategory.EVENT, True): AsyncEventHandler,
}

_CONTRACT_KEYS: dict[type, tuple[MessageCategory, bool]] = {v: k for k, v in _CONTRACTS.items()}


@dataclasses.dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one message: what to look up and how many to expect."""

    category: MessageCategory
    message_type: type
    is_async: bool
    contract: Any
    result_type: Any = None

    @property
    def multiplicity(self) -> Multiplicity:
        if self.category is MessageCategory.EVENT:
            return Multiplicity.MULTIPLE
        return Multiplicity.SINGLE


def category_of(message: object) -> MessageCategory:
    """Return the category of *message*.

    Raises :class:`TypeError` for objects that are not exactly one of
    Command, Query or Event.
    """
    matches = [category for base, category in _CATEGORY_BASES if isinstance(message, base)]
    if len(matches) != 1:
        kind = "not a Command, Query or Event" if not matches else "in more than one message category"
        raise TypeError(f"{type(message).__qualname__} is {kind}")
    return matches[0]


def contract_for(
    category: MessageCategory,
    message_type: type,
    *,
    is_async: bool,
    result_type: Any = None,
) -> Any:
    """Build the handler contract alias for the given category and types."""
    handler_cls: Any = _CONTRACTS[(category, is_async)]
    if category is MessageCategory.QUERY:
        return handler_cls[message_type, Any if result_type is None else result_type]
    return handler_cls[message_type]


def resolve(message: object, *, is_async: bool) -> Resolution:
    """Compute the :class:`Resolution` for *message* from its runtime type."""
    category = category_of(message)
    message_type = type(message)
    result_type = query_result_type(message_type) if category is MessageCategory.QUERY else None
    return Resolution(
        category=category,
        message_type=message_type,
        is_async=is_async,
        contract=contract_for(category, message_type, is_async=is_async, result_type=result_type),
        result_type=result_type,
    )


def contracts_of(handler_type: type) -> list[Any]:
    """List the concrete handler contracts *handler_type* declares.

    Walks the generic bases of the class and its ancestors and returns every
    fully parametrised contract alias, in MRO order, without duplicates::

        class OrderHandlers(CommandHandler[CreateOrder], QueryHandler[GetOrder, Order]): ...

        contracts_of(OrderHandlers)
        # [CommandHandler[CreateOrder], QueryHandler[GetOrder, Order]]
    """
    found: list[Any] = []
    for klass in handler_type.__mro__:
        for base in klass.__dict__.get("__orig_bases__", ()):
            origin = typing.get_origin(base)
            if origin not in _CONTRACT_KEYS:
                continue
            args = typing.get_args(base)
            if not args or any(isinstance(a, TypeVar) for a in args):
                continue
            if base not in found:
                found.append(base)
    return found


__all__ = [
    "MessageCategory",
    "Multiplicity",
    "Resolution",
    "category_of",
    "contract_for",
    "contracts_of",
    "resolve",
]
