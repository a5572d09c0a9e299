"""Configuration module."""

from bodega.config.logging import configure_logging, get_logger
from bodega.config.settings import Settings, get_settings, reset_settings

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "get_logger",
]
