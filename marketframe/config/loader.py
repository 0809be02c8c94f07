"""Settings loader with JSON file and environment variable support."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from .models import Settings

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def load_settings(settings_path: str | None = None) -> Settings:
    """
    Load settings from a JSON file with environment variable overrides.

    Priority: env vars > settings file > defaults

    Args:
        settings_path: Path to JSON settings file. If None, uses
                       MARKETFRAME_SETTINGS_PATH or 'settings.json' in the
                       current directory.

    Returns:
        Validated Settings instance

    Raises:
        FileNotFoundError: If settings file doesn't exist
        json.JSONDecodeError: If settings file has invalid JSON
        pydantic.ValidationError: If settings values are invalid
    """
    if settings_path is None:
        settings_path = os.environ.get("MARKETFRAME_SETTINGS_PATH", "settings.json")

    settings_file = Path(settings_path)
    if not settings_file.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_file}")

    with open(settings_file) as f:
        data: dict[str, Any] = json.load(f)

    # Format: MARKETFRAME_PAIRS, MARKETFRAME_TELEGRAM_TOKEN, etc.
    if pairs := os.environ.get("MARKETFRAME_PAIRS"):
        data["pairs"] = [pair for pair in pairs.split(",") if pair.strip()]

    if enabled := os.environ.get("MARKETFRAME_TELEGRAM_ENABLED"):
        data.setdefault("telegram", {})["enabled"] = enabled.strip().lower() in _TRUE_VALUES

    if token := os.environ.get("MARKETFRAME_TELEGRAM_TOKEN"):
        data.setdefault("telegram", {})["token"] = token

    if users := os.environ.get("MARKETFRAME_TELEGRAM_USERS"):
        data.setdefault("telegram", {})["users"] = [
            int(user) for user in users.split(",") if user.strip()
        ]

    settings = Settings(**data)
    logger.info("Loaded settings from %s: %d pairs", settings_file, len(settings.pairs))
    return settings
