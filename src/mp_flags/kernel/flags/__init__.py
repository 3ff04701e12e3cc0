"""Kernel flags – registry, expressions, guard and factory."""
from mp_flags.kernel.flags.definition import FlagData, FlagDefinition, FlagHook
from mp_flags.kernel.flags.registry import FlagMergeResult, FlagRegistry
from mp_flags.kernel.flags.guard import FlagContext, require_flags
from mp_flags.kernel.flags.factory import build_registry, parse_definition

__all__ = [
    "FlagContext",
    "FlagData",
    "FlagDefinition",
    "FlagHook",
    "FlagMergeResult",
    "FlagRegistry",
    "build_registry",
    "parse_definition",
    "require_flags",
]
