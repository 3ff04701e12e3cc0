"""Testing fixtures – registry and flag-context fixtures.

Enable with ``pytest_plugins = ["mp_flags.testing.fixtures"]``.
"""
from __future__ import annotations

from collections.abc import Iterator

import pytest

from mp_flags.kernel.flags import FlagContext, FlagDefinition, FlagRegistry


@pytest.fixture
def flag_registry() -> FlagRegistry:
    """A registry with ``admin`` (A, 3), ``user`` (U, 1) and ``guest`` (G, 0)."""
    return FlagRegistry(
        FlagDefinition("admin", "A", level=3),
        FlagDefinition("user", "U", level=1),
        FlagDefinition("guest", "G", level=0),
    )


@pytest.fixture
def flag_context() -> Iterator[type[FlagContext]]:
    """Yield :class:`FlagContext` and clear it after the test."""
    FlagContext.clear()
    yield FlagContext
    FlagContext.clear()


__all__ = ["flag_context", "flag_registry"]
