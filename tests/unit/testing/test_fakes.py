"""Unit tests for testing fakes – RecordingMediator."""
from __future__ import annotations

import asyncio
import dataclasses

import pytest

from mp_mediator.application.cqrs import Command, Event, Mediator, Query
from mp_mediator.kernel.errors import HandlerNotFoundError
from mp_mediator.testing import RecordingMediator


@dataclasses.dataclass(frozen=True)
class _Ship(Command):
    order_id: str


@dataclasses.dataclass(frozen=True)
class _Status(Query[str]):
    order_id: str


@dataclasses.dataclass(frozen=True)
class _Shipped(Event):
    order_id: str


class TestRecordingMediator:
    def test_is_a_mediator(self) -> None:
        assert isinstance(RecordingMediator(), Mediator)

    def test_records_commands_and_events(self) -> None:
        mediator = RecordingMediator()
        mediator.execute(_Ship("o-1"))
        mediator.raise_event(_Shipped("o-1"))
        assert mediator.commands == [_Ship("o-1")]
        assert mediator.events == [_Shipped("o-1")]
        assert mediator.messages == [_Ship("o-1"), _Shipped("o-1")]

    def test_answers_stubbed_queries(self) -> None:
        mediator = RecordingMediator({_Status: "shipped"})
        assert mediator.execute(_Status("o-1")) == "shipped"
        assert mediator.queries == [_Status("o-1")]

    def test_stub_after_construction(self) -> None:
        mediator = RecordingMediator()
        mediator.stub(_Status, "pending")
        assert mediator.execute(_Status("o-1")) == "pending"

    def test_unstubbed_query_raises_not_found(self) -> None:
        with pytest.raises(HandlerNotFoundError):
            RecordingMediator().execute(_Status("o-1"))

    def test_async_variants(self) -> None:
        mediator = RecordingMediator({_Status: "shipped"})

        async def _run() -> str:
            await mediator.execute_async(_Ship("o-2"))
            await mediator.raise_event_async(_Shipped("o-2"))
            return await mediator.execute_async(_Status("o-2"))

        assert asyncio.run(_run()) == "shipped"
        assert mediator.of_type(_Ship) == [_Ship("o-2")]
        assert len(mediator.messages) == 3

    def test_clear(self) -> None:
        mediator = RecordingMediator()
        mediator.execute(_Ship("o-1"))
        mediator.clear()
        assert mediator.messages == []

    def test_event_passed_to_execute_is_type_error(self) -> None:
        mediator = RecordingMediator()
        with pytest.raises(TypeError, match="event"):
            mediator.execute(_Shipped("o-1"))  # type: ignore[call-overload]
        with pytest.raises(TypeError, match="event"):
            mediator.execute_async(_Shipped("o-1"))  # type: ignore[call-overload]
        assert mediator.messages == []

    @pytest.mark.parametrize("message", [_Ship("o-1"), _Status("o-1")])
    def test_request_passed_to_raise_event_is_type_error(self, message: object) -> None:
        mediator = RecordingMediator({_Status: "shipped"})
        with pytest.raises(TypeError, match="expected event"):
            mediator.raise_event(message)  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="expected event"):
            mediator.raise_event_async(message)  # type: ignore[arg-type]
        assert mediator.messages == []

    def test_non_message_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            RecordingMediator().execute("not a message")  # type: ignore[call-overload]
