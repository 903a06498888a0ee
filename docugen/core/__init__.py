"""Core configuration and logging."""

from .config import settings, get_settings, Settings
from .logging import configure_logging

__all__ = ["settings", "get_settings", "Settings", "configure_logging"]
