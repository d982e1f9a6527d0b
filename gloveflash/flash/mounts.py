"""Bootloader volume detection."""

from collections.abc import Mapping
from pathlib import Path

from gloveflash.adapters.file_adapter import FileAdapterProtocol, create_file_adapter
from gloveflash.core.errors import DeviceNotMountedError, FileSystemError
from gloveflash.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)


def check_mounts(
    mount_paths: Mapping[str, Path],
    file_adapter: FileAdapterProtocol | None = None,
) -> dict[str, Path]:
    """Verify that every keyboard half is mounted in bootloader mode.

    All halves are checked before failing, so a single error reports every
    volume that is missing.

    Args:
        mount_paths: Expected mount path per half, in flashing order
        file_adapter: Adapter used to inspect the paths

    Returns:
        The mount paths, unchanged, when all of them exist

    Raises:
        DeviceNotMountedError: If at least one path is missing
    """
    file_adapter = file_adapter or create_file_adapter()

    problems: list[str] = []
    missing: list[Path] = []
    for side, path in mount_paths.items():
        try:
            present = file_adapter.exists(path)
        except FileSystemError as e:
            problems.append(f"Cannot check {side} half at {path}: {e}")
            missing.append(path)
            continue

        if present:
            logger.debug("device_mounted", side=side, path=str(path))
        else:
            problems.append(
                f"{side.capitalize()} half not connected in bootloader mass "
                f"storage device mode (expected {path})"
            )
            missing.append(path)

    if problems:
        logger.info("devices_missing", missing=[str(p) for p in missing])
        raise DeviceNotMountedError("\n".join(problems), missing=missing)

    return dict(mount_paths)
