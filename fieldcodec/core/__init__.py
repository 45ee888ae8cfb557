"""Core: settings and shared constants."""

from fieldcodec.core.config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
