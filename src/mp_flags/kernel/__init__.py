"""Kernel – flag registry, expression evaluation and the error hierarchy."""

from mp_flags.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ForbiddenError,
    MissingFlagsError,
    NotFoundError,
    UnauthorizedError,
    UnknownFlagError,
)

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
