"""Kernel flags – build a FlagRegistry from FlagSettings."""
from __future__ import annotations

from mp_flags.config.settings import FlagSettings
from mp_flags.config.validation import InvalidSettingValueError
from mp_flags.kernel.flags.definition import FlagDefinition
from mp_flags.kernel.flags.registry import FlagRegistry
from mp_flags.observability.logging import get_logger

logger = get_logger(__name__)


def parse_definition(entry: str) -> FlagDefinition:
    """Parse ``name:code[:level]`` into a :class:`FlagDefinition`."""
    parts = [p.strip() for p in entry.split(":")]
    if len(parts) not in (2, 3) or not parts[0]:
        raise InvalidSettingValueError(
            "definitions", entry, "expected 'name:code' or 'name:code:level'"
        )
    level = 0
    if len(parts) == 3 and parts[2]:
        try:
            level = int(parts[2])
        except ValueError as exc:
            raise InvalidSettingValueError("definitions", entry, "level must be an integer") from exc
        if level < 0:
            raise InvalidSettingValueError("definitions", entry, "level must be non-negative")
    return FlagDefinition(name=parts[0], code=parts[1], level=level)


def build_registry(settings: FlagSettings) -> FlagRegistry:
    """Return a registry with every entry of ``settings.definitions`` added."""
    registry = FlagRegistry()
    registry.add(*(parse_definition(entry) for entry in settings.definitions))
    logger.info("flag_registry_built", flags=len(registry))
    return registry


__all__ = ["build_registry", "parse_definition"]
