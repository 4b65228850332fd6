"""Global TAssist configuration loading."""

from tassist.config.global_config import (
    BrowserSettings,
    GlobalConfigError,
    LoggingSettings,
    LogLevel,
    RosterSettings,
    TAssistConfig,
    load_global_config,
)

__all__ = [
    "BrowserSettings",
    "GlobalConfigError",
    "LogLevel",
    "LoggingSettings",
    "RosterSettings",
    "TAssistConfig",
    "load_global_config",
]
