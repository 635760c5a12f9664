"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError           (application.py)
        ├── HandlerNotFoundError
        ├── AmbiguousHandlerError
        ├── HandlerMismatchError
        ├── HandlerTimeoutError
        └── ConfigError            (mp_mediator.config.validation)
"""

from mp_mediator.kernel.errors.application import (
    AmbiguousHandlerError,
    ApplicationError,
    HandlerMismatchError,
    HandlerNotFoundError,
    HandlerTimeoutError,
)
from mp_mediator.kernel.errors.base import BaseError

__all__ = [
    "AmbiguousHandlerError",
    "ApplicationError",
    "BaseError",
    "HandlerMismatchError",
    "HandlerNotFoundError",
    "HandlerTimeoutError",
]
