"""Configuration and settings management."""

from pedal_inventory.config.logging import get_logger, setup_logging
from pedal_inventory.config.settings import Settings, clear_settings_cache, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "clear_settings_cache",
    "setup_logging",
    "get_logger",
]
