"""Testing fakes – in-memory doubles for mediator ports."""
from mp_mediator.testing.fakes.mediator import RecordingMediator

__all__ = ["RecordingMediator"]
