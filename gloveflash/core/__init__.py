from .errors import (
    ArtifactError,
    ArtifactExpiredError,
    ConfigError,
    DeviceNotMountedError,
    FileSystemError,
    FlashError,
    GloveflashError,
    NoArtifactsError,
    PayloadNotFoundError,
)
from .logging import setup_logging


__all__ = [
    "setup_logging",
    "GloveflashError",
    "ConfigError",
    "FileSystemError",
    "FlashError",
    "DeviceNotMountedError",
    "ArtifactError",
    "NoArtifactsError",
    "ArtifactExpiredError",
    "PayloadNotFoundError",
]
