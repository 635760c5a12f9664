"""Application CQRS – Query, QueryHandler, AsyncQueryHandler."""
from __future__ import annotations

import abc
import typing
from typing import Any, Generic, TypeVar

Q = TypeVar("Q", bound="Query[Any]")
R = TypeVar("R")


class Query(Generic[R]):
    """Marker base for queries (read-only intent returning ``R``).

    Bind the result type when subclassing::

        @dataclasses.dataclass(frozen=True)
        class GetOrder(Query[OrderView]):
            order_id: str
    """


class QueryHandler(abc.ABC, Generic[Q, R]):
    """Synchronously handle a single query type and return its result."""

    @abc.abstractmethod
    def handle(self, query: Q) -> R: ...


class AsyncQueryHandler(abc.ABC, Generic[Q, R]):
    """Asynchronously handle a single query type and return its result."""

    @abc.abstractmethod
    async def handle(self, query: Q) -> R: ...


def query_result_type(query_type: type[Query[Any]]) -> Any:
    """Return the result type *query_type* binds on :class:`Query`.

    Intermediate generic bases are followed and their type variables
    substituted, so ``class Page(Query[T])`` / ``class GetUsers(Page[list[User]])``
    yields ``list[User]``.  Returns :data:`typing.Any` when the result type is
    never bound.
    """
    found = _bound_result(query_type, {})
    return Any if found is None else found


def _bound_result(cls: type, bindings: dict[Any, Any]) -> Any:
    # Own __orig_bases__ only; getattr would return an ancestor's.
    for base in cls.__dict__.get("__orig_bases__", cls.__bases__):
        origin = typing.get_origin(base) or base
        args = tuple(bindings.get(a, a) if isinstance(a, TypeVar) else a for a in typing.get_args(base))
        if origin is Query:
            if not args or isinstance(args[0], TypeVar):
                return None
            return args[0]
        if isinstance(origin, type) and issubclass(origin, Query):
            params = getattr(origin, "__parameters__", ())
            found = _bound_result(origin, dict(zip(params, args)))
            if found is not None:
                return found
    return None


__all__ = ["AsyncQueryHandler", "Query", "QueryHandler", "query_result_type"]
