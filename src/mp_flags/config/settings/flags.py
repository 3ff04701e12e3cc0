"""Config settings – FlagSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_flags.config.settings.base import Settings
from mp_flags.config.validation import InvalidSettingValueError

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"})


@dataclasses.dataclass
class FlagSettings(Settings):
    """Settings for seeding a :class:`~mp_flags.kernel.flags.FlagRegistry`.

    Read from ``FLAGS_*`` environment variables by
    :class:`~mp_flags.config.settings.loaders.EnvSettingsLoader`::

        FLAGS_DEFINITIONS=admin:A:3,user:U:1,guest:G
        FLAGS_LOG_LEVEL=DEBUG
        FLAGS_JSON_LOGS=true

    Each entry of ``definitions`` has the shape ``name:code[:level]``.
    """

    _prefix: ClassVar[str] = "FLAGS"

    definitions: list[str] = dataclasses.field(default_factory=list)
    log_level: str = "INFO"
    json_logs: bool = False

    def _validate(self) -> None:
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )
        self.log_level = self.log_level.upper()


__all__ = ["FlagSettings"]
