"""설정 패키지"""

from walletcore.config.loader import (
    ChartSettings,
    LoggingSettings,
    Settings,
    SettingsLoadError,
    get_settings,
    load_settings,
)

__all__ = [
    "ChartSettings",
    "LoggingSettings",
    "Settings",
    "SettingsLoadError",
    "get_settings",
    "load_settings",
]
