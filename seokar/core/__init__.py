"""Core modules for SeoKar AI."""

from .config import AppConfig, ProviderConfig
from .hooks import HookManager
from .i18n import I18n

__all__ = [
    "AppConfig",
    "ProviderConfig",
    "HookManager",
    "I18n",
]
