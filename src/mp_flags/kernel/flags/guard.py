"""Kernel flags – FlagContext and the ``@require_flags`` decorator.

:class:`FlagContext` keeps the current caller's flag list in a
:mod:`contextvars` variable so each asyncio task has its own value.
:func:`require_flags` checks that list against an expression before a
command / query handler runs.
"""

from __future__ import annotations

import contextvars
import functools
import inspect
from typing import Any, Callable, TypeVar

from mp_flags.kernel.errors import MissingFlagsError, UnauthorizedError
from mp_flags.kernel.flags.registry import FlagRegistry

F = TypeVar("F", bound=Callable[..., Any])

_VAR: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "_flag_context", default=None
)


class FlagContext:
    """Store and retrieve the flag list of the current caller."""

    @staticmethod
    def get_current() -> str | None:
        """Return the current flag list, or ``None`` if absent."""
        return _VAR.get()

    @staticmethod
    def set_current(flags: str) -> contextvars.Token[str | None]:
        """Set the current flag list and return a reset token."""
        return _VAR.set(flags)

    @staticmethod
    def reset(token: contextvars.Token[str | None]) -> None:
        _VAR.reset(token)

    @staticmethod
    def clear() -> None:
        """Remove the current flag list from context."""
        _VAR.set(None)

    @staticmethod
    def require() -> str:
        """Return the current flag list or raise ``UnauthorizedError``."""
        flags = _VAR.get()
        if flags is None:
            raise UnauthorizedError("No flag list in context")
        return flags


def require_flags(registry: FlagRegistry, expression: str) -> Callable[[F], F]:
    """Decorator that enforces *expression* on the current :class:`FlagContext`.

    Works on both async and sync callables.  Raises :class:`UnauthorizedError`
    if no flag list is bound, and :class:`MissingFlagsError` if the bound list
    does not satisfy *expression*.

    Example::

        @require_flags(registry, "admin|moderator !banned")
        async def delete_post(cmd: DeletePostCommand) -> None:
            ...
    """

    def _enforce() -> None:
        flags = FlagContext.require()
        if not registry.check(flags, expression):
            raise MissingFlagsError(flags, expression)

    def decorator(fn: F) -> F:
        if inspect.iscoroutinefunction(fn):

            @functools.wraps(fn)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                _enforce()
                return await fn(*args, **kwargs)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(fn)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            _enforce()
            return fn(*args, **kwargs)

        return sync_wrapper  # type: ignore[return-value]

    return decorator


__all__ = ["FlagContext", "require_flags"]
