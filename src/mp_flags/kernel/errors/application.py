"""Application-layer errors — guards around flag-protected handlers."""

from __future__ import annotations

from typing import Any

from mp_flags.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """No flag list is bound to the current context."""

    default_code = "unauthorized"


class ForbiddenError(ApplicationError):
    """The caller's flags do not grant access."""

    default_code = "forbidden"

    def __init__(
        self,
        message: str = "Access denied",
        *,
        expression: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.expression = expression


class MissingFlagsError(ForbiddenError):
    """A flag list failed the expression required by a guarded callable."""

    default_code = "missing_flags"

    def __init__(self, flags: str, expression: str, **kwargs: Any) -> None:
        super().__init__(
            f"flags {flags!r} do not satisfy {expression!r}",
            expression=expression,
            detail={"flags": flags, "expression": expression},
            **kwargs,
        )
        self.flags = flags


__all__ = [
    "ApplicationError",
    "ForbiddenError",
    "MissingFlagsError",
    "UnauthorizedError",
]
