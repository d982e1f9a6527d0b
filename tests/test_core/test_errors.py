"""Tests for the gloveflash exception hierarchy."""

from pathlib import Path

from gloveflash.core.errors import (
    ArtifactError,
    ArtifactExpiredError,
    DeviceNotMountedError,
    FileSystemError,
    FlashError,
    GloveflashError,
    NoArtifactsError,
    PayloadNotFoundError,
    create_file_error,
)


def test_file_error_message_names_operation_and_path():
    error = create_file_error(
        Path("/nonexistent/file.uf2"), "copy_file", FileNotFoundError("File not found")
    )

    assert isinstance(error, FileSystemError)
    assert isinstance(error, GloveflashError)
    assert (
        str(error)
        == "File operation 'copy_file' failed on '/nonexistent/file.uf2': File not found"
    )
    assert error.context["operation"] == "copy_file"
    assert isinstance(error.original, FileNotFoundError)


def test_payload_not_found_lists_members():
    error = PayloadNotFoundError("glove80.uf2", ["left.uf2", "right.uf2"])

    assert "'glove80.uf2'" in str(error)
    assert "left.uf2, right.uf2" in str(error)
    assert error.found == ["left.uf2", "right.uf2"]


def test_payload_not_found_empty_archive():
    error = PayloadNotFoundError("glove80.uf2", [])

    assert "<empty archive>" in str(error)


def test_device_not_mounted_keeps_missing_paths():
    missing = [Path("/Volumes/GLV80LHBOOT")]
    error = DeviceNotMountedError("left missing", missing=missing)

    assert error.missing == missing
    assert error.context == {"missing": ["/Volumes/GLV80LHBOOT"]}
    assert isinstance(error, FlashError)


def test_artifact_errors_are_flash_errors():
    for error_cls in (NoArtifactsError, ArtifactExpiredError):
        error = error_cls("boom")
        assert isinstance(error, ArtifactError)
        assert isinstance(error, FlashError)
        assert error.context == {}
