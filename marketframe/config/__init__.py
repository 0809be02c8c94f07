"""Configuration package."""

from .loader import load_settings
from .models import Settings, TelegramSettings

__all__ = [
    "Settings",
    "TelegramSettings",
    "load_settings",
]
