"""Firmware flashing pipeline."""

from .mounts import check_mounts
from .selection import select_latest_artifact
from .service import FlashService, create_flash_service


__all__ = [
    "FlashService",
    "create_flash_service",
    "check_mounts",
    "select_latest_artifact",
]
