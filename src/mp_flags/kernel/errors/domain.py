"""Domain errors — lookups against the flag registry."""

from __future__ import annotations

from typing import Any

from mp_flags.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class NotFoundError(DomainError):
    """The requested resource does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class UnknownFlagError(NotFoundError):
    """No registered flag matches the token by name or code."""

    default_code = "unknown_flag"

    def __init__(self, token: str, **kwargs: Any) -> None:
        super().__init__("Flag", token, detail={"token": token}, **kwargs)
        self.token = token


__all__ = ["DomainError", "NotFoundError", "UnknownFlagError"]
