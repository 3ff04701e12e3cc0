"""Kernel flags – tokenising and term evaluation for flag expressions.

An expression is a whitespace-separated list of terms, implicitly ANDed:

* ``name``      — *name* is present in the flag list.
* ``!name``     — *name* is absent from the flag list.
* ``a|!b|c``    — at least one alternative passes the presence test above.
* ``name+``     — the list's level is at least the level of *name*.

Presence tests compare raw tokens; they do not resolve codes or fold case.
"""
from __future__ import annotations

from typing import AbstractSet

NEGATION = "!"
ALTERNATION = "|"
THRESHOLD = "+"


def tokenize(value: str | None) -> list[str]:
    """Split a flag list or expression on whitespace, dropping empty tokens."""
    return value.split() if value else []


def is_alternation(term: str) -> bool:
    return ALTERNATION in term


def is_threshold(term: str) -> bool:
    return term.endswith(THRESHOLD)


def threshold_base(term: str) -> str:
    """Return the flag name a ``name+`` term refers to."""
    return term[: -len(THRESHOLD)]


def is_negated(term: str) -> bool:
    return term.startswith(NEGATION)


def strip_negation(term: str) -> str:
    return term[len(NEGATION):] if is_negated(term) else term


def compare_flag(term: str, current: AbstractSet[str]) -> bool:
    """Presence test for a plain or negated term against *current*."""
    return is_negated(term) != (strip_negation(term) in current)


def any_alternative(term: str, current: AbstractSet[str]) -> bool:
    """Evaluate ``a|b|...``; thresholds are not expanded inside alternatives."""
    return any(compare_flag(alt, current) for alt in term.split(ALTERNATION))


__all__ = [
    "ALTERNATION",
    "NEGATION",
    "THRESHOLD",
    "any_alternative",
    "compare_flag",
    "is_alternation",
    "is_negated",
    "is_threshold",
    "strip_negation",
    "threshold_base",
    "tokenize",
]
