"""Config package."""

from atomfeed.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
