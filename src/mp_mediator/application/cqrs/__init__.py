"""Application CQRS – Commands, Queries, Events, handler contracts and the Mediator."""
from mp_mediator.application.cqrs.commands import AsyncCommandHandler, Command, CommandHandler
from mp_mediator.application.cqrs.queries import AsyncQueryHandler, Query, QueryHandler, query_result_type
from mp_mediator.application.cqrs.events import AsyncEventHandler, Event, EventHandler
from mp_mediator.application.cqrs.resolver import (
    MessageCategory,
    Multiplicity,
    Resolution,
    category_of,
    contract_for,
    contracts_of,
    resolve,
)
from mp_mediator.application.cqrs.adapters import HandlerAdapter, adapt
from mp_mediator.application.cqrs.mediator import InProcessMediator, Mediator
from mp_mediator.application.cqrs.registry import HandlerRegistry

__all__ = [
    "AsyncCommandHandler", "Command", "CommandHandler",
    "AsyncQueryHandler", "Query", "QueryHandler", "query_result_type",
    "AsyncEventHandler", "Event", "EventHandler",
    "MessageCategory", "Multiplicity", "Resolution",
    "category_of", "contract_for", "contracts_of", "resolve",
    "HandlerAdapter", "adapt",
    "InProcessMediator", "Mediator",
    "HandlerRegistry",
]
