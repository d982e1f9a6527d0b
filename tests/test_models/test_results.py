"""Tests for result models."""

from pathlib import Path

from gloveflash.models.results import FlashResult


def test_add_flashed_device_records_message():
    result = FlashResult(success=True, artifact_id=1)
    destination = Path("/Volumes/GLV80RHBOOT/glove80.uf2")

    result.add_flashed_device(destination)

    assert result.devices_flashed == [destination]
    assert result.messages == [f"Copied firmware to {destination}"]
    assert result.success


def test_to_dict_is_json_friendly():
    result = FlashResult(
        success=True,
        artifact_id=7,
        devices_flashed=[Path("/Volumes/GLV80LHBOOT/glove80.uf2")],
    )

    data = result.to_dict()

    assert data["artifact_id"] == 7
    assert data["devices_flashed"] == ["/Volumes/GLV80LHBOOT/glove80.uf2"]
    assert "artifact_name" not in data
