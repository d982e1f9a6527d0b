"""Exception hierarchy for Gloveflash."""

from pathlib import Path
from typing import Any


class GloveflashError(Exception):
    """Base exception for all Gloveflash errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class ConfigError(GloveflashError):
    """Raised when required configuration is missing or invalid."""


class FileSystemError(GloveflashError):
    """Raised when a file system operation fails."""

    def __init__(
        self,
        path: Path,
        operation: str,
        original: Exception | None = None,
        context: dict[str, Any] | None = None,
    ):
        reason = str(original) if original is not None else "unknown error"
        super().__init__(
            f"File operation '{operation}' failed on '{path}': {reason}",
            context={"path": str(path), "operation": operation, **(context or {})},
        )
        self.path = path
        self.operation = operation
        self.original = original


class FlashError(GloveflashError):
    """Raised when firmware cannot be flashed to the devices."""


class DeviceNotMountedError(FlashError):
    """Raised when one or more keyboard halves are not mounted."""

    def __init__(self, message: str, missing: list[Path]):
        super().__init__(message, context={"missing": [str(p) for p in missing]})
        self.missing = missing


class ArtifactError(FlashError):
    """Raised when no usable firmware artifact can be obtained."""


class NoArtifactsError(ArtifactError):
    """Raised when the repository has no workflow artifacts."""


class ArtifactExpiredError(ArtifactError):
    """Raised when the latest artifact has already expired."""


class PayloadNotFoundError(ArtifactError):
    """Raised when the artifact archive lacks the expected firmware file."""

    def __init__(self, expected: str, found: list[str]):
        listing = ", ".join(found) if found else "<empty archive>"
        super().__init__(
            f"Artifact archive does not contain '{expected}' (found: {listing})",
            context={"expected": expected, "found": found},
        )
        self.expected = expected
        self.found = found


def create_file_error(
    path: Path,
    operation: str,
    error: Exception,
    context: dict[str, Any] | None = None,
) -> FileSystemError:
    """Wrap a low level exception in a FileSystemError.

    Args:
        path: Path the operation was performed on
        operation: Name of the failed operation
        error: Original exception
        context: Additional context for debugging

    Returns:
        FileSystemError carrying the original exception
    """
    return FileSystemError(path, operation, error, context)
