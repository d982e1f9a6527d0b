"""Configuration for Gloveflash."""

from .models import FlashConfig
from .settings import FlashSettings, load_settings


__all__ = ["FlashConfig", "FlashSettings", "load_settings"]
