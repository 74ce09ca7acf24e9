"""Public API for errtypes configuration."""

from .loader import load_settings
from .models import DEFAULT_CONFIG_PATH, ErrtypesSettings, LoggingSettings

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ErrtypesSettings",
    "LoggingSettings",
    "load_settings",
]
