"""
mp_mediator – In-process mediator for commands, queries and events.

Import path convention::

    from mp_mediator.application.cqrs import Command, CommandHandler, InProcessMediator
    from mp_mediator.application.cqrs import HandlerRegistry
    from mp_mediator.kernel.errors import HandlerNotFoundError
    from mp_mediator.config import MediatorSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
