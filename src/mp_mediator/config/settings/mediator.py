"""Config settings – MediatorSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_mediator.config.settings.base import Settings
from mp_mediator.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class MediatorSettings(Settings):
    """Runtime options for :class:`~mp_mediator.application.cqrs.InProcessMediator`.

    Every option defaults to the plain call-chain behaviour: events are
    delivered one handler at a time and no handler is ever timed out.

    Environment variables (via :class:`EnvSettingsLoader`)::

        MEDIATOR_CONCURRENT_EVENTS=true
        MEDIATOR_HANDLER_TIMEOUT_SECONDS=2.5
        MEDIATOR_LOG_DISPATCH=false
    """

    _prefix: ClassVar[str] = "MEDIATOR"

    concurrent_events: bool = False
    handler_timeout_seconds: float | None = None
    log_dispatch: bool = True

    def _validate(self) -> None:
        if self.handler_timeout_seconds is not None and self.handler_timeout_seconds <= 0:
            raise InvalidSettingValueError(
                "handler_timeout_seconds",
                self.handler_timeout_seconds,
                "must be a positive number of seconds",
            )


__all__ = ["MediatorSettings"]
