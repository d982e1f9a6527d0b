"""Tests for bootloader volume detection."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from gloveflash.adapters.file_adapter import FileAdapterProtocol
from gloveflash.core.errors import DeviceNotMountedError, FileSystemError
from gloveflash.flash.mounts import check_mounts


def mounts(directory: Path) -> dict[str, Path]:
    return {"left": directory / "GLV80LHBOOT", "right": directory / "GLV80RHBOOT"}


def test_both_mounted(mount_dir: Path):
    result = check_mounts(mounts(mount_dir))

    assert result == mounts(mount_dir)
    assert list(result) == ["left", "right"]


def test_left_missing(tmp_path: Path):
    (tmp_path / "GLV80RHBOOT").mkdir()

    with pytest.raises(DeviceNotMountedError) as exc_info:
        check_mounts(mounts(tmp_path))

    message = str(exc_info.value)
    assert "Left half" in message
    assert str(tmp_path / "GLV80LHBOOT") in message
    assert "Right half" not in message
    assert exc_info.value.missing == [tmp_path / "GLV80LHBOOT"]


def test_both_missing_are_reported_together(tmp_path: Path):
    with pytest.raises(DeviceNotMountedError) as exc_info:
        check_mounts(mounts(tmp_path))

    lines = str(exc_info.value).splitlines()
    assert len(lines) == 2
    assert str(tmp_path / "GLV80LHBOOT") in lines[0]
    assert str(tmp_path / "GLV80RHBOOT") in lines[1]
    assert exc_info.value.missing == [
        tmp_path / "GLV80LHBOOT",
        tmp_path / "GLV80RHBOOT",
    ]


def test_missing_parent_directory(tmp_path: Path):
    with pytest.raises(DeviceNotMountedError):
        check_mounts(mounts(tmp_path / "not-there"))


def test_stat_failure_is_aggregated(tmp_path: Path):
    left, right = mounts(tmp_path).values()
    adapter = Mock(spec=FileAdapterProtocol)
    adapter.exists.side_effect = [
        FileSystemError(left, "exists", PermissionError("Permission denied")),
        False,
    ]

    with pytest.raises(DeviceNotMountedError) as exc_info:
        check_mounts(mounts(tmp_path), adapter)

    message = str(exc_info.value)
    assert "Cannot check left half" in message
    assert "Permission denied" in message
    assert "Right half" in message
    assert adapter.exists.call_count == 2
