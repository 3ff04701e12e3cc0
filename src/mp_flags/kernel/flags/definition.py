"""Kernel flags – FlagDefinition record."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable

FlagData = dict[str, Any]
FlagHook = Callable[[FlagData], FlagData]


@dataclasses.dataclass
class FlagDefinition:
    """A registered flag: a named, leveled tag with an optional compact code.

    ``data`` is the default payload stored under the flag's name when the
    flag is activated by :meth:`FlagRegistry.set` and the data bag has no
    entry for it yet.  ``add`` and ``remove`` transform the whole data bag
    when the flag is activated or deactivated.

    Example::

        premium = FlagDefinition(
            name="premium",
            code="P",
            level=2,
            data={"quota": 10},
            add=lambda d: {**d, "upgraded": True},
        )
    """

    name: str
    code: str = ""
    level: int = 0
    data: FlagData | None = None
    add: FlagHook | None = None
    remove: FlagHook | None = None

    def matches(self, token: str) -> bool:
        """Return ``True`` if *token* names this flag or equals its code."""
        if self.name.lower() == token.lower():
            return True
        return bool(self.code) and self.code == token


__all__ = ["FlagData", "FlagDefinition", "FlagHook"]
