"""Application CQRS – Command, CommandHandler, AsyncCommandHandler."""
from __future__ import annotations

import abc
from typing import Generic, TypeVar

C = TypeVar("C", bound="Command")


class Command:
    """Marker base for commands (intent to change state).

    A command has no result and exactly one handler.
    """


class CommandHandler(abc.ABC, Generic[C]):
    """Synchronously execute a single command type."""

    @abc.abstractmethod
    def execute(self, command: C) -> None: ...


class AsyncCommandHandler(abc.ABC, Generic[C]):
    """Asynchronously execute a single command type."""

    @abc.abstractmethod
    async def execute_async(self, command: C) -> None: ...


__all__ = ["AsyncCommandHandler", "Command", "CommandHandler"]
