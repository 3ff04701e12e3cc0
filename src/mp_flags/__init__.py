"""
mp_flags – in-process flag registry and expression evaluator.

Import path convention::

    from mp_flags import FlagDefinition, FlagRegistry
    from mp_flags.kernel.flags import FlagContext, require_flags
    from mp_flags.config import EnvSettingsLoader, FlagSettings
"""

from mp_flags.kernel.flags import FlagDefinition, FlagMergeResult, FlagRegistry

__version__ = "0.1.0"
__all__ = ["FlagDefinition", "FlagMergeResult", "FlagRegistry", "__version__"]
