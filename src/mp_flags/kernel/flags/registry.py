"""Kernel flags – FlagRegistry.

The registry owns an ordered list of :class:`FlagDefinition`\\ s and answers
questions about whitespace-separated flag lists:

* :meth:`FlagRegistry.lvl` — highest level among the listed flags.
* :meth:`FlagRegistry.codes` — packed code string for the listed flags.
* :meth:`FlagRegistry.check` — evaluate an expression against the list.
* :meth:`FlagRegistry.set` — merge an expression into the list and a data bag.

Unknown tokens never raise; they contribute ``0``, ``""`` or are ignored.
Use :meth:`FlagRegistry.require` for a strict lookup.

Example::

    registry = FlagRegistry(
        FlagDefinition("admin", "A", level=3),
        FlagDefinition("user", "U", level=1),
    )
    registry.check("admin user", "admin|guest !banned user+")  # True
    registry.codes("user admin")  # "UA"
"""

from __future__ import annotations

import copy
import dataclasses
from typing import Any, Iterator

from mp_flags.kernel.errors import UnknownFlagError
from mp_flags.kernel.flags import expression as expr
from mp_flags.kernel.flags.definition import FlagData, FlagDefinition
from mp_flags.observability.logging import get_logger

logger = get_logger(__name__)


@dataclasses.dataclass
class FlagMergeResult:
    """Outcome of :meth:`FlagRegistry.set`.

    Supports attribute access, ``result["flags"]`` and ``flags, data = result``.
    """

    flags: str
    data: FlagData

    def __getitem__(self, key: str) -> Any:
        if key not in ("flags", "data"):
            raise KeyError(key)
        return getattr(self, key)

    def __iter__(self) -> Iterator[Any]:
        yield self.flags
        yield self.data


class FlagRegistry:
    """Ordered, case-insensitive registry of flag definitions.

    Definitions passed to the constructor are stored as given.  Use
    :meth:`add` to register with override semantics.
    """

    def __init__(self, *definitions: FlagDefinition) -> None:
        self._flags: list[FlagDefinition] = list(definitions)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add(self, *definitions: FlagDefinition) -> None:
        """Register one or more definitions.

        A definition whose name collides case-insensitively with a registered
        one replaces it in place.  The replacement keeps the existing name in
        lowercase, takes the incoming code and level, and drops ``data``,
        ``add`` and ``remove``.  New names are appended as given, with an
        unset level defaulted to ``0``.
        """
        for definition in definitions:
            self._add(definition)

    def _add(self, definition: FlagDefinition) -> None:
        key = definition.name.lower()
        existing = next((f for f in self._flags if f.name.lower() == key), None)

        if existing is None:
            definition.level = definition.level or 0
            self._flags.append(definition)
            logger.debug(
                "flag_registered",
                flag=definition.name,
                code=definition.code,
                level=definition.level,
            )
            return

        replacement = FlagDefinition(
            name=existing.name.lower(),
            code=definition.code,
            level=definition.level or 0,
        )
        self._flags = [replacement if f.name.lower() == key else f for f in self._flags]
        logger.debug(
            "flag_overridden",
            flag=replacement.name,
            code=replacement.code,
            level=replacement.level,
            dropped_data=definition.data is not None,
            dropped_hooks=bool(definition.add or definition.remove),
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def exists(self, token: str) -> FlagDefinition | None:
        """Return the first definition matching *token* by name or code."""
        return next((f for f in self._flags if f.matches(token)), None)

    def require(self, token: str) -> FlagDefinition:
        """Like :meth:`exists` but raise :class:`UnknownFlagError` on a miss."""
        flag = self.exists(token)
        if flag is None:
            raise UnknownFlagError(token)
        return flag

    @property
    def definitions(self) -> tuple[FlagDefinition, ...]:
        return tuple(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def __iter__(self) -> Iterator[FlagDefinition]:
        return iter(tuple(self._flags))

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.exists(token) is not None

    def __repr__(self) -> str:
        names = ", ".join(f.name for f in self._flags)
        return f"FlagRegistry([{names}])"

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------

    def lvl(self, flags: str | None) -> int:
        """Return the highest level among *flags*; ``0`` when none resolve."""
        level = 0
        for token in expr.tokenize(flags):
            flag = self.exists(token)
            if flag is not None and (flag.level or 0) > level:
                level = flag.level
        return level

    def codes(self, flags: str | None) -> str:
        """Concatenate the codes of *flags* in order, skipping unknown tokens."""
        parts: list[str] = []
        for token in expr.tokenize(flags):
            flag = self.exists(token)
            parts.append(flag.code if flag is not None else "")
        return "".join(parts)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def check(self, flags: str | None, expression: str | None) -> bool:
        """Return ``True`` if *flags* satisfies every term of *expression*."""
        terms = expr.tokenize(expression)
        if not terms:
            return True

        current = frozenset(expr.tokenize(flags))
        for term in terms:
            if not self._evaluate(term, flags, current):
                logger.debug("check_term_failed", flags=flags, term=term)
                return False
        return True

    def _evaluate(self, term: str, flags: str | None, current: frozenset[str]) -> bool:
        if expr.is_alternation(term):
            return expr.any_alternative(term, current)
        if expr.is_threshold(term):
            base = self.exists(expr.threshold_base(term))
            return base is not None and self.lvl(flags) >= (base.level or 0)
        return expr.compare_flag(term, current)

    def set(
        self,
        flags: str | None,
        data: FlagData | None,
        expression: str | None,
    ) -> FlagMergeResult:
        """Apply the directives of *expression* to *flags* and *data*.

        ``!name`` removes *name* from the list, deletes ``data[name]`` and runs
        the flag's ``remove`` hook.  A bare directive adds the resolved flag's
        canonical name, seeds ``data[name]`` from the flag's default ``data``
        when missing, and runs its ``add`` hook.  Unknown directives are
        ignored.  *data* is mutated in place; hooks may replace it, and the
        final mapping is returned.
        """
        if data is None:
            data = {}
        working: dict[str, None] = dict.fromkeys(expr.tokenize(flags))

        for directive in expr.tokenize(expression):
            if expr.is_negated(directive):
                name = expr.strip_negation(directive)
                working.pop(name, None)
                data.pop(name, None)
                flag = self.exists(name)
                if flag is not None and flag.remove is not None:
                    data = flag.remove(data)
                continue

            flag = self.exists(directive)
            if flag is None:
                logger.debug("merge_directive_ignored", directive=directive)
                continue

            working[flag.name] = None
            if flag.data is not None and flag.name not in data:
                data[flag.name] = copy.deepcopy(flag.data)
            if flag.add is not None:
                data = flag.add(data)

        return FlagMergeResult(flags=" ".join(working).strip(), data=data)


__all__ = ["FlagMergeResult", "FlagRegistry"]
