"""Shared fixtures for the mp-flags test suite."""

from __future__ import annotations

from mp_flags.testing.fixtures import flag_context, flag_registry  # noqa: F401
