"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── NotFoundError
    │       └── UnknownFlagError
    └── ApplicationError     (application.py)
        ├── UnauthorizedError
        └── ForbiddenError
            └── MissingFlagsError
"""

from mp_flags.kernel.errors.application import (
    ApplicationError,
    ForbiddenError,
    MissingFlagsError,
    UnauthorizedError,
)
from mp_flags.kernel.errors.base import BaseError
from mp_flags.kernel.errors.domain import DomainError, NotFoundError, UnknownFlagError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ForbiddenError",
    "MissingFlagsError",
    "NotFoundError",
    "UnauthorizedError",
    "UnknownFlagError",
]
