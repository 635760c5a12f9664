"""Testing – doubles for code that depends on the Mediator port."""
from mp_mediator.testing.fakes import RecordingMediator

__all__ = ["RecordingMediator"]
